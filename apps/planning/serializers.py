from rest_framework import serializers
from .models import (
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


TIME_FORMAT = '%H:%M'


class CoupleOwnedSerializer(serializers.ModelSerializer):
    """Base serializer for rows owned by a couple. The couple comes from the session."""

    coupleId = serializers.UUIDField(source='couple_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)


# =============================================================================
# Wedding info
# =============================================================================

class WeddingInfoSerializer(CoupleOwnedSerializer):

    weddingDate = serializers.DateField(source='wedding_date', required=False, allow_null=True)
    groomName = serializers.CharField(source='groom_name', max_length=50, required=False, allow_null=True, allow_blank=True)
    brideName = serializers.CharField(source='bride_name', max_length=50, required=False, allow_null=True, allow_blank=True)
    totalBudget = serializers.IntegerField(source='total_budget', min_value=0, required=False)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = WeddingInfo
        fields = [
            'id',
            'coupleId',
            'weddingDate',
            'groomName',
            'brideName',
            'totalBudget',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id']


# =============================================================================
# Venues
# =============================================================================

class VenueQuoteSerializer(serializers.ModelSerializer):
    """Quote from a venue. The venue must belong to the caller's couple."""

    venueId = serializers.PrimaryKeyRelatedField(
        source='venue',
        queryset=Venue.objects.all(),
        pk_field=serializers.UUIDField(format='hex_verbose'),
    )
    date = serializers.DateField(required=False, allow_null=True)
    time = serializers.TimeField(format=TIME_FORMAT, required=False, allow_null=True)
    minGuests = serializers.IntegerField(source='min_guests', min_value=0, required=False)
    mealCost = serializers.IntegerField(source='meal_cost', min_value=0, required=False)
    rentalFee = serializers.IntegerField(source='rental_fee', min_value=0, required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = VenueQuote
        fields = [
            'id',
            'venueId',
            'date',
            'time',
            'estimate',
            'minGuests',
            'mealCost',
            'rentalFee',
            'memo',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id']

    def validate_venueId(self, value):
        request = self.context.get('request')
        if request is None or value.couple_id != request.user.couple_id:
            raise serializers.ValidationError('존재하지 않는 장소입니다')
        return value


class VenueSerializer(CoupleOwnedSerializer):

    nearestStation = serializers.CharField(source='nearest_station', max_length=100, required=False, allow_blank=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Venue
        fields = [
            'id',
            'coupleId',
            'name',
            'address',
            'lat',
            'lng',
            'nearestStation',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id']


# =============================================================================
# Checklist and budget
# =============================================================================

class ChecklistItemSerializer(CoupleOwnedSerializer):

    dueDate = serializers.CharField(source='due_date', max_length=20, required=False, allow_null=True, allow_blank=True)
    date = serializers.DateField(required=False, allow_null=True)

    class Meta:
        model = ChecklistItem
        fields = [
            'id',
            'coupleId',
            'title',
            'description',
            'completed',
            'dueDate',
            'date',
            'category',
            'createdAt',
        ]
        read_only_fields = ['id']


class BudgetItemSerializer(CoupleOwnedSerializer):

    budgetAmount = serializers.IntegerField(source='budget_amount', min_value=0, required=False)
    actualAmount = serializers.IntegerField(source='actual_amount', min_value=0, required=False)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = BudgetItem
        fields = [
            'id',
            'coupleId',
            'category',
            'budgetAmount',
            'actualAmount',
            'memo',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id']


class BudgetSummarySerializer(serializers.Serializer):
    """Totals across a couple's budget items."""

    totalBudget = serializers.IntegerField()
    plannedTotal = serializers.IntegerField()
    actualTotal = serializers.IntegerField()
    remaining = serializers.IntegerField()
    itemCount = serializers.IntegerField()


# =============================================================================
# Guests
# =============================================================================

class GuestSerializer(CoupleOwnedSerializer):

    invitationSent = serializers.BooleanField(source='invitation_sent', required=False)
    tableNumber = serializers.IntegerField(source='table_number', min_value=0, required=False, allow_null=True)

    class Meta:
        model = Guest
        fields = [
            'id',
            'coupleId',
            'name',
            'phone',
            'side',
            'relation',
            'invitationSent',
            'attendance',
            'tableNumber',
            'memo',
            'createdAt',
        ]
        read_only_fields = ['id']


class GroupGuestSerializer(CoupleOwnedSerializer):

    estimatedCount = serializers.IntegerField(source='estimated_count', min_value=1, required=False)

    class Meta:
        model = GroupGuest
        fields = [
            'id',
            'coupleId',
            'name',
            'side',
            'estimatedCount',
            'memo',
            'createdAt',
        ]
        read_only_fields = ['id']


class SideCountSerializer(serializers.Serializer):
    guests = serializers.IntegerField()
    attending = serializers.IntegerField()
    groupEstimated = serializers.IntegerField()


class GuestSummarySerializer(serializers.Serializer):
    """Headcounts per side, individual guests plus group estimates."""

    total = serializers.IntegerField()
    attending = serializers.IntegerField()
    declined = serializers.IntegerField()
    pending = serializers.IntegerField()
    invitationsSent = serializers.IntegerField()
    expectedHeadcount = serializers.IntegerField()
    bride = SideCountSerializer()
    groom = SideCountSerializer()


# =============================================================================
# Notes and calendar
# =============================================================================

class SharedNoteSerializer(CoupleOwnedSerializer):
    """Note shared by the couple. Author defaults to the writer's name."""

    memberId = serializers.UUIDField(source='member_id', read_only=True, allow_null=True)
    author = serializers.CharField(max_length=50, required=False)

    class Meta:
        model = SharedNote
        fields = [
            'id',
            'coupleId',
            'memberId',
            'author',
            'content',
            'createdAt',
        ]
        read_only_fields = ['id']


class CalendarEventSerializer(CoupleOwnedSerializer):

    time = serializers.TimeField(format=TIME_FORMAT, required=False, allow_null=True)

    class Meta:
        model = CalendarEvent
        fields = [
            'id',
            'coupleId',
            'title',
            'date',
            'time',
            'category',
            'memo',
            'createdAt',
        ]
        read_only_fields = ['id']


class CalendarMonthSerializer(serializers.Serializer):
    """Validate the ?month=YYYY-MM filter."""

    month = serializers.RegexField(
        r'^[0-9]{4}-(0[1-9]|1[0-2])$',
        required=False,
        error_messages={'invalid': 'month는 YYYY-MM 형식이어야 합니다'},
    )


class EventCategorySerializer(CoupleOwnedSerializer):

    class Meta:
        model = EventCategory
        fields = ['id', 'coupleId', 'name', 'color', 'createdAt']
        read_only_fields = ['id']
