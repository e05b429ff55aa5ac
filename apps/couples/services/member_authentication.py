"""Member login service."""

from apps.couples.models import Member

from .credentials import hash_pin, validate_pin
from .exceptions import CredentialMismatch, ValidationError


def authenticate_member(*, name: str, pin: str) -> Member:
    """
    Find the member with this exact name and PIN.

    Names are unique only inside a couple, so the lookup is system-wide
    and ties are broken by creation order.

    Raises:
        CredentialMismatch: For any failure, including a malformed PIN
    """
    if not isinstance(name, str) or not name.strip():
        raise CredentialMismatch()

    try:
        validate_pin(pin)
    except ValidationError:
        raise CredentialMismatch()

    member = (
        Member.objects
        .select_related('couple')
        .filter(name=name.strip(), pin_hash=hash_pin(pin))
        .order_by('created_at', 'id')
        .first()
    )
    if member is None:
        raise CredentialMismatch()

    return member
