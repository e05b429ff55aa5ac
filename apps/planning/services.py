import logging
from django.db import transaction
from django.db.models import Count, Q, Sum
from .models import (
    Attendance,
    BudgetItem,
    Guest,
    GroupGuest,
    Side,
    WeddingInfo,
)

logger = logging.getLogger(__name__)


def get_wedding_info(*, couple_id):
    return WeddingInfo.objects.filter(couple_id=couple_id).first()


@transaction.atomic
def upsert_wedding_info(*, couple_id, **fields) -> WeddingInfo:
    """
    Create or partially update the couple's wedding info.

    Args:
        couple_id: Owning couple
        **fields: Model field values to set (already validated)

    Returns:
        WeddingInfo: The saved row
    """
    info, created = WeddingInfo.objects.select_for_update().get_or_create(
        couple_id=couple_id,
        defaults=fields,
    )
    if not created and fields:
        for name, value in fields.items():
            setattr(info, name, value)
        info.save()

    if created:
        logger.info("Wedding info created for couple %s", couple_id)
    return info


def budget_summary(*, couple_id) -> dict:
    """Planned and actual totals against the couple's total budget."""
    totals = BudgetItem.objects.filter(couple_id=couple_id).aggregate(
        planned=Sum('budget_amount'),
        actual=Sum('actual_amount'),
        count=Count('id'),
    )
    info = get_wedding_info(couple_id=couple_id)
    total_budget = info.total_budget if info else 0
    actual = totals['actual'] or 0

    return {
        'totalBudget': total_budget,
        'plannedTotal': totals['planned'] or 0,
        'actualTotal': actual,
        'remaining': total_budget - actual,
        'itemCount': totals['count'],
    }


def guest_summary(*, couple_id) -> dict:
    """
    Headcounts for the couple's guest list.

    expectedHeadcount counts individual guests who have not declined
    plus every group estimate.
    """
    guests = Guest.objects.filter(couple_id=couple_id)
    totals = guests.aggregate(
        total=Count('id'),
        attending=Count('id', filter=Q(attendance=Attendance.ATTENDING)),
        declined=Count('id', filter=Q(attendance=Attendance.DECLINED)),
        pending=Count('id', filter=Q(attendance=Attendance.PENDING)),
        invitations_sent=Count('id', filter=Q(invitation_sent=True)),
    )

    per_side = {}
    for side in Side.values:
        side_guests = guests.filter(side=side).aggregate(
            guests=Count('id'),
            attending=Count('id', filter=Q(attendance=Attendance.ATTENDING)),
        )
        group_estimated = GroupGuest.objects.filter(
            couple_id=couple_id,
            side=side,
        ).aggregate(total=Sum('estimated_count'))['total'] or 0
        per_side[side] = {
            'guests': side_guests['guests'],
            'attending': side_guests['attending'],
            'groupEstimated': group_estimated,
        }

    group_total = sum(s['groupEstimated'] for s in per_side.values())

    return {
        'total': totals['total'],
        'attending': totals['attending'],
        'declined': totals['declined'],
        'pending': totals['pending'],
        'invitationsSent': totals['invitations_sent'],
        'expectedHeadcount': totals['total'] - totals['declined'] + group_total,
        'bride': per_side[Side.BRIDE],
        'groom': per_side[Side.GROOM],
    }


def filter_events_by_month(queryset, month):
    """Restrict calendar events to a 'YYYY-MM' month."""
    year, month_number = (int(part) for part in month.split('-'))
    return queryset.filter(date__year=year, date__month=month_number)
