"""
Credential hashing and invite code generation.

PINs are hashed with unsalted SHA-256 so that login can look members up
by digest equality. The ``hash_algorithm`` column on ``Member`` records
the scheme for a future migration to a salted hash.
"""

import hashlib
import re
import secrets
import string

from django.utils.crypto import constant_time_compare

from .exceptions import ValidationError

PIN_PATTERN = re.compile(r'^[0-9]{4}$')
PIN_HASH_ALGORITHM = 'sha256'

INVITE_CODE_LENGTH = 6
INVITE_CODE_ALPHABET = string.digits + string.ascii_uppercase
INVITE_CODE_PATTERN = re.compile(r'^[A-Z0-9]{6}$')


def validate_pin(pin: str) -> str:
    """
    Ensure the PIN is exactly four ASCII digits.

    Raises:
        ValidationError: If the PIN has the wrong shape
    """
    if not isinstance(pin, str) or not PIN_PATTERN.fullmatch(pin):
        raise ValidationError('PIN은 숫자 4자리여야 합니다')
    return pin


def hash_pin(pin: str) -> str:
    """Return the hex digest stored for a PIN. Callers validate first."""
    return hashlib.sha256(pin.encode('utf-8')).hexdigest()


def verify_pin(pin: str, pin_hash: str) -> bool:
    return constant_time_compare(hash_pin(pin), pin_hash)


def generate_invite_code() -> str:
    """Generate a 6 character code from [A-Z0-9]. Uniqueness is the store's job."""
    return ''.join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH))


def normalize_invite_code(code) -> str:
    """Trim and upper-case user input so typed codes match stored ones."""
    if not isinstance(code, str):
        return ''
    return code.strip().upper()
