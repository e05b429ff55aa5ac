# ==========================================
# apps/couples/admin.py
# ==========================================

from django.contrib import admin
from apps.couples.models import Couple, Member
from apps.couples.services import regenerate_invite_code


class MemberInline(admin.TabularInline):
    """Inline admin for couple members."""
    model = Member
    extra = 0
    fields = ['name', 'role', 'created_at']
    readonly_fields = ['created_at']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Couple)
class CoupleAdmin(admin.ModelAdmin):
    """Admin interface for Couples."""

    list_display = [
        'invite_code',
        'member_count',
        'pairing_state',
        'created_at'
    ]
    search_fields = ['invite_code', 'members__name']
    readonly_fields = ['invite_code', 'created_at']
    inlines = [MemberInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def member_count(self, obj):
        """Show number of members."""
        return obj.members.count()
    member_count.short_description = 'Members'

    actions = ['regenerate_invite_codes']

    def regenerate_invite_codes(self, request, queryset):
        """Regenerate invite codes for selected couples."""
        for couple in queryset:
            regenerate_invite_code(couple_id=couple.id)
        self.message_user(request, f"Regenerated invite codes for {queryset.count()} couples")
    regenerate_invite_codes.short_description = "Regenerate invite codes"


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    """Admin interface for Members. PIN hashes are never shown."""

    list_display = ['name', 'couple', 'role', 'created_at']
    list_filter = ['role', 'created_at']
    search_fields = ['name', 'couple__invite_code']
    fields = ['couple', 'name', 'role', 'hash_algorithm', 'created_at']
    readonly_fields = ['hash_algorithm', 'created_at']
    ordering = ['-created_at']

    def has_add_permission(self, request):
        # Members are created through register/join only
        return False

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('couple')
