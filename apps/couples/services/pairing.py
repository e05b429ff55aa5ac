"""
Couple pairing service.

A couple moves EMPTY -> HALF_PAIRED on register and HALF_PAIRED -> PAIRED
on join. Join and preview share the same invite resolution so a preview
never disagrees with the join that follows it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from django.conf import settings
from django.db import transaction, IntegrityError

from apps.couples.models import Couple, Member, MemberRole, MAX_MEMBERS_PER_COUPLE

from .credentials import (
    INVITE_CODE_PATTERN,
    PIN_HASH_ALGORITHM,
    generate_invite_code,
    hash_pin,
    normalize_invite_code,
    validate_pin,
)
from .exceptions import (
    ValidationError,
    InvalidInviteCode,
    CoupleAlreadyComplete,
    DuplicateNameInCouple,
    StorageFailure,
)

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 50

# Role handed to a joiner when the code is valid but the couple has no members
DEFAULT_JOIN_ROLE = MemberRole.BRIDE


@dataclass(frozen=True)
class InvitePreview:
    valid: bool
    assigned_role: Optional[str] = None
    partner_name: Optional[str] = None
    error: Optional[str] = None


def validate_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('이름을 입력해주세요')
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f'이름은 {MAX_NAME_LENGTH}자 이하여야 합니다')
    return name


def validate_role(role) -> str:
    if role not in MemberRole.values:
        raise ValidationError('역할은 bride 또는 groom이어야 합니다')
    return role


def _max_retries(max_retries: Optional[int]) -> int:
    return settings.INVITE_CODE_MAX_RETRIES if max_retries is None else max_retries


def _resolve_open_couple(invite_code, *, lock: bool) -> Tuple[Couple, List[Member]]:
    """
    Resolve an invite code to a couple that still has a free slot.

    Raises:
        InvalidInviteCode: If no couple matches the code
        CoupleAlreadyComplete: If the couple already has two members
    """
    code = normalize_invite_code(invite_code)
    if not INVITE_CODE_PATTERN.fullmatch(code):
        raise InvalidInviteCode()

    queryset = Couple.objects.select_for_update() if lock else Couple.objects.all()
    try:
        couple = queryset.get(invite_code=code)
    except Couple.DoesNotExist:
        raise InvalidInviteCode()

    members = list(couple.members.order_by('created_at', 'id'))
    if len(members) >= MAX_MEMBERS_PER_COUPLE:
        raise CoupleAlreadyComplete()

    return couple, members


def _assigned_role(members: List[Member]) -> str:
    if not members:
        return DEFAULT_JOIN_ROLE
    return MemberRole.complement(members[0].role)


def register_couple(
    *,
    name: str,
    pin: str,
    role: str,
    max_retries: Optional[int] = None
) -> Member:
    """
    Create a new couple with its first member.

    Each attempt runs in its own transaction so an invite code collision
    only discards that attempt.

    Args:
        name: Display name of the first member
        pin: 4-digit PIN
        role: 'bride' or 'groom', chosen explicitly
        max_retries: Attempts to find an unused invite code

    Returns:
        Created Member, bound to the new couple

    Raises:
        ValidationError: If name, PIN or role is malformed
        StorageFailure: If no unique invite code was found after retries
    """
    name = validate_name(name)
    validate_pin(pin)
    role = validate_role(role)
    pin_hash = hash_pin(pin)

    attempts = _max_retries(max_retries)
    last_error = None
    for attempt in range(attempts):
        invite_code = generate_invite_code()

        try:
            with transaction.atomic():
                couple = Couple.objects.create(invite_code=invite_code)
                member = Member.objects.create(
                    couple=couple,
                    name=name,
                    pin_hash=pin_hash,
                    hash_algorithm=PIN_HASH_ALGORITHM,
                    role=role,
                )
        except IntegrityError as e:
            last_error = e
            logger.warning("Invite code collision on register (attempt %d/%d)", attempt + 1, attempts)
            continue

        logger.info("Couple %s registered by member %s (%s)", couple.id, member.id, role)
        return member

    raise StorageFailure(
        f"Failed to generate unique invite code on register after {attempts} attempts"
    ) from last_error


@transaction.atomic
def join_couple(*, name: str, pin: str, invite_code: str) -> Member:
    """
    Join an existing couple using its invite code.

    The couple row is locked for the duration of the check-then-insert,
    and the (couple, role) / (couple, name) constraints back the checks
    at the database level.

    Raises:
        ValidationError: If name or PIN is malformed
        InvalidInviteCode: If the code matches no couple
        CoupleAlreadyComplete: If the couple already has two members
        DuplicateNameInCouple: If the name is already taken in the couple
    """
    name = validate_name(name)
    validate_pin(pin)

    couple, members = _resolve_open_couple(invite_code, lock=True)

    if any(m.name == name for m in members):
        raise DuplicateNameInCouple()

    role = _assigned_role(members)

    try:
        with transaction.atomic():
            member = Member.objects.create(
                couple=couple,
                name=name,
                pin_hash=hash_pin(pin),
                hash_algorithm=PIN_HASH_ALGORITHM,
                role=role,
            )
    except IntegrityError:
        # Lost a race with a concurrent join
        if couple.members.filter(name=name).exists():
            raise DuplicateNameInCouple()
        raise CoupleAlreadyComplete()

    logger.info("Member %s joined couple %s as %s", member.id, couple.id, role)
    return member


def preview_invite(invite_code: str) -> InvitePreview:
    """
    Describe what a join with this code would produce. Read-only.

    Failures are returned as data rather than raised.
    """
    try:
        couple, members = _resolve_open_couple(invite_code, lock=False)
    except (InvalidInviteCode, CoupleAlreadyComplete) as e:
        return InvitePreview(valid=False, error=str(e))

    return InvitePreview(
        valid=True,
        assigned_role=_assigned_role(members),
        partner_name=members[0].name if members else None,
    )


@transaction.atomic
def regenerate_invite_code(*, couple_id: UUID, max_retries: Optional[int] = None) -> Couple:
    """
    Rotate a couple's invite code.

    Raises:
        InvalidInviteCode: If the couple no longer exists
        StorageFailure: If no unique code was found after retries
    """
    try:
        couple = Couple.objects.select_for_update().get(id=couple_id)
    except Couple.DoesNotExist:
        raise InvalidInviteCode()

    old_code = couple.invite_code
    attempts = _max_retries(max_retries)
    last_error = None
    for attempt in range(attempts):
        new_code = generate_invite_code()
        if new_code == old_code:
            continue

        try:
            with transaction.atomic():
                couple.invite_code = new_code
                couple.save(update_fields=['invite_code'])
        except IntegrityError as e:
            last_error = e
            couple.invite_code = old_code
            logger.warning("Invite code collision on regenerate (attempt %d/%d)", attempt + 1, attempts)
            continue

        logger.info("Invite code regenerated for couple %s", couple.id)
        return couple

    raise StorageFailure(
        f"Failed to generate unique invite code for couple {couple.id} after {attempts} attempts"
    ) from last_error
