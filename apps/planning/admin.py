# ==========================================
# apps/planning/admin.py
# ==========================================

from django.contrib import admin
from apps.planning.models import (
    WeddingInfo,
    Venue,
    VenueQuote,
    ChecklistItem,
    BudgetItem,
    Guest,
    GroupGuest,
    SharedNote,
    CalendarEvent,
    EventCategory,
)


class VenueQuoteInline(admin.TabularInline):
    """Inline admin for venue quotes."""
    model = VenueQuote
    extra = 0
    fields = ['date', 'time', 'estimate', 'min_guests', 'meal_cost', 'rental_fee']


@admin.register(WeddingInfo)
class WeddingInfoAdmin(admin.ModelAdmin):
    list_display = ['couple', 'wedding_date', 'groom_name', 'bride_name', 'total_budget']
    search_fields = ['couple__invite_code', 'groom_name', 'bride_name']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    """Admin interface for Venues."""

    list_display = ['name', 'couple', 'nearest_station', 'created_at']
    search_fields = ['name', 'address', 'couple__invite_code']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [VenueQuoteInline]


@admin.register(ChecklistItem)
class ChecklistItemAdmin(admin.ModelAdmin):
    list_display = ['title', 'couple', 'category', 'completed', 'date']
    list_filter = ['completed', 'category']
    search_fields = ['title', 'couple__invite_code']


@admin.register(BudgetItem)
class BudgetItemAdmin(admin.ModelAdmin):
    list_display = ['category', 'couple', 'budget_amount', 'actual_amount']
    search_fields = ['category', 'couple__invite_code']


@admin.register(Guest)
class GuestAdmin(admin.ModelAdmin):
    """Admin interface for Guests."""

    list_display = ['name', 'couple', 'side', 'attendance', 'invitation_sent', 'table_number']
    list_filter = ['side', 'attendance', 'invitation_sent']
    search_fields = ['name', 'relation', 'couple__invite_code']


@admin.register(GroupGuest)
class GroupGuestAdmin(admin.ModelAdmin):
    list_display = ['name', 'couple', 'side', 'estimated_count']
    list_filter = ['side']


@admin.register(SharedNote)
class SharedNoteAdmin(admin.ModelAdmin):
    list_display = ['author', 'couple', 'created_at']
    search_fields = ['author', 'content']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('couple', 'member')


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ['title', 'couple', 'date', 'time', 'category']
    list_filter = ['category']
    date_hierarchy = 'date'


@admin.register(EventCategory)
class EventCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'couple', 'color']
