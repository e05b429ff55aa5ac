"""
URL configuration for the Wedding Planner project.

API paths carry no trailing slash; the SPA calls them verbatim.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.couples.urls import auth_urlpatterns, admin_urlpatterns
from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Django admin
    path('django-admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Couple pairing and sessions
    path('api/auth/', include((auth_urlpatterns, 'couples'))),
    path('api/admin/', include((admin_urlpatterns, 'couple_admin'))),

    # Planning resources
    path('api/', include('apps.planning.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
