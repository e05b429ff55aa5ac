from django.urls import path
from . import views

# Paths carry no trailing slash: they are the SPA's fixed contract.

auth_urlpatterns = [
    # POST /api/auth/register          - Start a couple (first member)
    # GET  /api/auth/invite/{code}     - Preview a join
    # POST /api/auth/invite/regenerate - Rotate the invite code
    # POST /api/auth/join              - Join a couple (second member)
    # POST /api/auth/login             - Login with name + PIN
    # POST /api/auth/logout            - Destroy the session
    # GET  /api/auth/me                - Current member/couple/partner
    path('register', views.register, name='register'),
    path('invite/regenerate', views.regenerate_invite, name='invite-regenerate'),
    path('invite/<str:code>', views.invite_preview, name='invite-preview'),
    path('join', views.join, name='join'),
    path('login', views.login, name='login'),
    path('logout', views.logout, name='logout'),
    path('me', views.me, name='me'),
]

admin_urlpatterns = [
    path('login', views.admin_login, name='login'),
    path('logout', views.admin_logout, name='logout'),
    path('me', views.admin_status, name='me'),
    path('couples', views.admin_couples, name='couples'),
    path('couples/<uuid:pk>', views.admin_delete_couple, name='couple-delete'),
    path('members/<uuid:pk>', views.admin_delete_member, name='member-delete'),
]
