from __future__ import annotations

import binascii
import hashlib
import hmac

from django.core.exceptions import ValidationError


def generate_hmac_sha512(message: str, secret_key: str) -> str:
    """Hex HMAC-SHA512 of ``message`` keyed with ``secret_key``."""
    if not isinstance(secret_key, str) or not secret_key:
        raise ValidationError("Secret key is required for hashing.", code="hash_failed")
    if not isinstance(message, str):
        raise ValidationError("Hash message must be a string.", code="hash_failed")
    return hmac.new(secret_key.encode("utf-8"), message.encode("utf-8"), hashlib.sha512).hexdigest()


def decode_hex_digest(value) -> bytes:
    if not isinstance(value, str) or not value:
        raise ValidationError("DV is missing.", code="invalid_digest")
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("DV is not valid hex.", code="invalid_digest") from exc


def digests_match(calculated: bytes, received: bytes) -> bool:
    # compare_digest runs in time independent of the first differing byte.
    return hmac.compare_digest(calculated, received)
