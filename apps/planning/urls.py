from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'planning'

# No trailing slashes: paths are the SPA's fixed contract.
router = DefaultRouter(trailing_slash=False)
router.register(r'venues', views.VenueViewSet, basename='venue')
router.register(r'quotes', views.VenueQuoteViewSet, basename='quote')
router.register(r'checklist', views.ChecklistItemViewSet, basename='checklist')
router.register(r'budget', views.BudgetItemViewSet, basename='budget')
router.register(r'guests', views.GuestViewSet, basename='guest')
router.register(r'group-guests', views.GroupGuestViewSet, basename='group-guest')
router.register(r'notes', views.SharedNoteViewSet, basename='note')
router.register(r'calendar-events', views.CalendarEventViewSet, basename='calendar-event')
router.register(r'event-categories', views.EventCategoryViewSet, basename='event-category')

urlpatterns = [
    # GET/PUT /api/wedding-info                - Couple's wedding info
    path('wedding-info', views.wedding_info, name='wedding-info'),

    # Router routes (list/create, retrieve/update/delete)
    # GET    /api/venues/{id}/quotes         - Quotes for one venue
    # GET    /api/quotes?venue={id}          - Quotes filtered by venue
    # GET    /api/budget/summary             - Budget totals
    # GET    /api/guests/summary             - Guest headcounts
    # GET    /api/calendar-events?month=YYYY-MM
    path('', include(router.urls)),
]
