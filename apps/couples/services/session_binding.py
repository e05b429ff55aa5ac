"""
Session binding service.

Maps a Django session to the member/couple identity behind it. The
session only stores identifiers; every request re-reads member, couple
and partner from the database so admin deletions take effect at once.
"""

import logging
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils.crypto import constant_time_compare

from apps.couples.models import Couple, Member

logger = logging.getLogger(__name__)

MEMBER_ID_KEY = 'member_id'
COUPLE_ID_KEY = 'couple_id'
IS_ADMIN_KEY = 'is_admin'


class CoupleIdentity:
    """Resolved identity of the member making a request."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, member: Member, couple: Optional[Couple], partner: Optional[Member]):
        self.member = member
        self.couple = couple
        self.partner = partner

    def __str__(self):
        return str(self.member)

    @property
    def pk(self):
        return self.member.pk

    @property
    def couple_id(self):
        return self.couple.id if self.couple else None


def bind_session(request, member: Member) -> None:
    """
    Attach a member to the request's session.

    The session key is rotated so a pre-login session id cannot be
    reused. The admin flag survives the rotation.
    """
    session = request.session
    is_admin = session.get(IS_ADMIN_KEY, False)
    session.cycle_key()
    session[MEMBER_ID_KEY] = str(member.id)
    session[COUPLE_ID_KEY] = str(member.couple_id) if member.couple_id else None
    session[IS_ADMIN_KEY] = is_admin


def _forget_member(session) -> None:
    session.pop(MEMBER_ID_KEY, None)
    session.pop(COUPLE_ID_KEY, None)


def resolve_identity(session) -> Optional[CoupleIdentity]:
    """
    Resolve a session to its current member, couple and partner.

    Returns None when the session carries no member or the member has
    been deleted since the session was bound.
    """
    member_id = session.get(MEMBER_ID_KEY)
    if not member_id:
        return None

    try:
        member = (
            Member.objects
            .select_related('couple')
            .filter(id=member_id)
            .first()
        )
    except (ValueError, DjangoValidationError):
        member = None

    if member is None:
        _forget_member(session)
        return None

    couple = member.couple
    partner = couple.partner_of(member) if couple else None

    current_couple_id = str(couple.id) if couple else None
    if session.get(COUPLE_ID_KEY) != current_couple_id:
        session[COUPLE_ID_KEY] = current_couple_id

    return CoupleIdentity(member=member, couple=couple, partner=partner)


def clear_session(request) -> None:
    """Destroy the session record and issue a fresh, empty session."""
    request.session.flush()


def check_admin_password(password) -> bool:
    expected = settings.ADMIN_PASSWORD
    if not expected or not isinstance(password, str):
        return False
    return constant_time_compare(password, expected)


def grant_admin(request) -> None:
    request.session[IS_ADMIN_KEY] = True


def revoke_admin(request) -> None:
    request.session[IS_ADMIN_KEY] = False


def is_admin_session(session) -> bool:
    return bool(session.get(IS_ADMIN_KEY, False))
