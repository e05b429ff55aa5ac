import uuid
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.couples.permissions import IsCoupleMember
from .models import (
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
from .serializers import (
    WeddingInfoSerializer,
    VenueSerializer,
    VenueQuoteSerializer,
    ChecklistItemSerializer,
    BudgetItemSerializer,
    BudgetSummarySerializer,
    GuestSerializer,
    GroupGuestSerializer,
    GuestSummarySerializer,
    SharedNoteSerializer,
    CalendarEventSerializer,
    CalendarMonthSerializer,
    EventCategorySerializer,
)
from .services import (
    get_wedding_info,
    upsert_wedding_info,
    budget_summary,
    guest_summary,
    filter_events_by_month,
)


class CoupleScopedViewSet(viewsets.ModelViewSet):
    """
    CRUD over rows owned by the session's couple.

    Rows of other couples are invisible: list skips them and detail
    routes answer 404.
    """

    permission_classes = [IsCoupleMember]
    model = None

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return self.model.objects.none()
        return self.model.objects.filter(couple_id=self.request.user.couple_id)

    def perform_create(self, serializer):
        serializer.save(couple_id=self.request.user.couple_id)


# =============================================================================
# Wedding info
# =============================================================================

@extend_schema(
    methods=['GET'],
    responses={200: WeddingInfoSerializer},
    description="The couple's wedding info. An empty object when none is saved yet.",
    tags=['wedding-info'],
)
@extend_schema(
    methods=['PUT'],
    request=WeddingInfoSerializer,
    responses={200: WeddingInfoSerializer},
    description="Create or partially update the couple's wedding info.",
    tags=['wedding-info'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsCoupleMember])
def wedding_info(request):
    couple_id = request.user.couple_id

    if request.method == 'GET':
        info = get_wedding_info(couple_id=couple_id)
        return Response(WeddingInfoSerializer(info).data if info else {})

    serializer = WeddingInfoSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    info = upsert_wedding_info(couple_id=couple_id, **serializer.validated_data)
    return Response(WeddingInfoSerializer(info).data)


# =============================================================================
# Venues
# =============================================================================

class VenueViewSet(CoupleScopedViewSet):
    """
    Wedding halls under consideration.

    quotes: All quotes recorded for one venue
    """

    model = Venue
    serializer_class = VenueSerializer

    @extend_schema(responses={200: VenueQuoteSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def quotes(self, request, pk=None):
        venue = self.get_object()
        serializer = VenueQuoteSerializer(venue.quotes.all(), many=True)
        return Response(serializer.data)


class VenueQuoteViewSet(viewsets.ModelViewSet):
    """Quotes are owned through their venue."""

    serializer_class = VenueQuoteSerializer
    permission_classes = [IsCoupleMember]

    @extend_schema(parameters=[OpenApiParameter('venue', str, description='Only quotes of this venue')])
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return VenueQuote.objects.none()

        queryset = VenueQuote.objects.filter(
            venue__couple_id=self.request.user.couple_id
        ).select_related('venue')

        venue_id = self.request.query_params.get('venue')
        if venue_id:
            try:
                queryset = queryset.filter(venue_id=uuid.UUID(venue_id))
            except ValueError:
                return queryset.none()
        return queryset


# =============================================================================
# Checklist and budget
# =============================================================================

class ChecklistItemViewSet(CoupleScopedViewSet):
    model = ChecklistItem
    serializer_class = ChecklistItemSerializer


class BudgetItemViewSet(CoupleScopedViewSet):
    """
    Budget lines.

    summary: Planned/actual totals against the wedding's total budget
    """

    model = BudgetItem
    serializer_class = BudgetItemSerializer

    @extend_schema(responses={200: BudgetSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        return Response(budget_summary(couple_id=request.user.couple_id))


# =============================================================================
# Guests
# =============================================================================

class GuestViewSet(CoupleScopedViewSet):
    """
    Individually invited guests.

    summary: Headcounts per side including group estimates
    """

    model = Guest
    serializer_class = GuestSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        side = self.request.query_params.get('side')
        if side:
            queryset = queryset.filter(side=side)
        return queryset

    @extend_schema(responses={200: GuestSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        return Response(guest_summary(couple_id=request.user.couple_id))


class GroupGuestViewSet(CoupleScopedViewSet):
    model = GroupGuest
    serializer_class = GroupGuestSerializer


# =============================================================================
# Notes and calendar
# =============================================================================

class SharedNoteViewSet(CoupleScopedViewSet):
    model = SharedNote
    serializer_class = SharedNoteSerializer

    def perform_create(self, serializer):
        member = self.request.user.member
        serializer.save(
            couple_id=self.request.user.couple_id,
            member=member,
            author=serializer.validated_data.get('author') or member.name,
        )


class CalendarEventViewSet(CoupleScopedViewSet):
    model = CalendarEvent
    serializer_class = CalendarEventSerializer

    @extend_schema(parameters=[OpenApiParameter('month', str, description='YYYY-MM')])
    def list(self, request, *args, **kwargs):
        filters = CalendarMonthSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = self.get_queryset()
        month = filters.validated_data.get('month')
        if month:
            queryset = filter_events_by_month(queryset, month)

        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


class EventCategoryViewSet(CoupleScopedViewSet):
    model = EventCategory
    serializer_class = EventCategorySerializer
