"""
Admin management service.

Deletions are idempotent: removing an id that no longer exists is a
no-op, matching what the admin console expects after a double click.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import Prefetch, QuerySet

from apps.couples.models import Couple, Member

logger = logging.getLogger(__name__)


def list_couples_with_members() -> QuerySet[Couple]:
    """All couples by creation, each with its members prefetched in order."""
    return (
        Couple.objects
        .prefetch_related(
            Prefetch('members', queryset=Member.objects.order_by('created_at', 'id'))
        )
        .order_by('created_at', 'id')
    )


@transaction.atomic
def delete_couple(*, couple_id: UUID) -> bool:
    """
    Delete a couple. Members and planning data cascade with it.

    Returns:
        True if a couple was deleted, False if none existed
    """
    deleted, _ = Couple.objects.filter(id=couple_id).delete()
    if deleted:
        logger.info("Admin deleted couple %s", couple_id)
    return bool(deleted)


@transaction.atomic
def delete_member(*, member_id: UUID) -> bool:
    """
    Delete a single member. A paired couple drops back to half paired.

    Returns:
        True if a member was deleted, False if none existed
    """
    deleted, _ = Member.objects.filter(id=member_id).delete()
    if deleted:
        logger.info("Admin deleted member %s", member_id)
    return bool(deleted)
