"""
Domain-specific exceptions for couples app.

These exceptions represent pairing and credential rule violations and
are caught in views and converted to HTTP responses. Messages are
user-facing and written in the SPA's language.
"""


class CouplesServiceError(Exception):
    """Base exception for all couples service errors."""

    default_message = '요청을 처리할 수 없습니다'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ValidationError(CouplesServiceError):
    """Raised when name, PIN, role or invite code input is malformed."""

    default_message = '입력값이 올바르지 않습니다'


class InvalidInviteCode(CouplesServiceError):
    """Raised when an invite code matches no couple."""

    default_message = '유효하지 않은 초대 코드입니다'


class CoupleAlreadyComplete(CouplesServiceError):
    """Raised when joining a couple that already has two members."""

    default_message = '이미 커플이 완성되었습니다'


class DuplicateNameInCouple(CouplesServiceError):
    """Raised when the joining name is already used inside the couple."""

    default_message = '같은 이름의 멤버가 이미 있습니다'


class CredentialMismatch(CouplesServiceError):
    """Raised when no member matches the given name and PIN."""

    default_message = '이름 또는 PIN이 올바르지 않습니다'


class StorageFailure(CouplesServiceError):
    """Raised when persistence fails in a way the caller cannot fix."""

    default_message = '일시적인 오류가 발생했습니다. 잠시 후 다시 시도해주세요'
