"""
Couples app services layer.

Services contain the pairing, credential and session logic.
All state-changing operations use transactions and storage-level
constraints for concurrency protection.
"""

from .exceptions import (
    CouplesServiceError,
    ValidationError,
    InvalidInviteCode,
    CoupleAlreadyComplete,
    DuplicateNameInCouple,
    CredentialMismatch,
    StorageFailure,
)

from .credentials import (
    hash_pin,
    verify_pin,
    validate_pin,
    generate_invite_code,
    normalize_invite_code,
)

from .pairing import (
    InvitePreview,
    register_couple,
    join_couple,
    preview_invite,
    regenerate_invite_code,
)

from .member_authentication import (
    authenticate_member,
)

from .session_binding import (
    CoupleIdentity,
    bind_session,
    resolve_identity,
    clear_session,
    check_admin_password,
    grant_admin,
    revoke_admin,
    is_admin_session,
)

from .admin_management import (
    list_couples_with_members,
    delete_couple,
    delete_member,
)


__all__ = [
    # Exceptions
    'CouplesServiceError',
    'ValidationError',
    'InvalidInviteCode',
    'CoupleAlreadyComplete',
    'DuplicateNameInCouple',
    'CredentialMismatch',
    'StorageFailure',

    # Credentials
    'hash_pin',
    'verify_pin',
    'validate_pin',
    'generate_invite_code',
    'normalize_invite_code',

    # Pairing
    'InvitePreview',
    'register_couple',
    'join_couple',
    'preview_invite',
    'regenerate_invite_code',

    # Login
    'authenticate_member',

    # Sessions
    'CoupleIdentity',
    'bind_session',
    'resolve_identity',
    'clear_session',
    'check_admin_password',
    'grant_admin',
    'revoke_admin',
    'is_admin_session',

    # Admin
    'list_couples_with_members',
    'delete_couple',
    'delete_member',
]
