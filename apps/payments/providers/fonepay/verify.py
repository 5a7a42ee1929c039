from __future__ import annotations

import logging
from collections.abc import Mapping

from django.core.exceptions import ValidationError

from . import (
    DV_FIELD,
    RESPONSE_FIELD_ORDER,
    ResponseCode,
    VerificationOutcome,
    VerificationResult,
)
from .hashing import decode_hex_digest, digests_match, generate_hmac_sha512

logger = logging.getLogger(__name__)


def _field_value(payload: Mapping, key: str) -> str:
    value = payload[key]
    return "" if value is None else str(value)


def _payload_prn(payload) -> str:
    if not isinstance(payload, Mapping):
        return ""
    return str(payload.get("PRN") or "")


def build_response_message(payload: Mapping) -> str:
    """
    Join the response fields in gateway order, e.g.
    ``ORDER1,M001,success,successful,T123,B01,C,100.00,0.00``.
    """
    missing = [field for field in RESPONSE_FIELD_ORDER if field not in payload]
    if missing:
        raise ValidationError(
            f"Missing required fields in response: {', '.join(missing)}",
            code=VerificationOutcome.MISSING_FIELDS.value,
        )
    return ",".join(_field_value(payload, field) for field in RESPONSE_FIELD_ORDER)


def _verify_or_raise(payload, secret_key) -> None:
    if payload is None or not isinstance(payload, Mapping):
        raise ValidationError("Response payload is required.", code=VerificationOutcome.INVALID_INPUT.value)
    if not isinstance(secret_key, str) or not secret_key:
        raise ValidationError("Secret key is required.", code=VerificationOutcome.INVALID_INPUT.value)

    response_code = payload.get("RC")
    if response_code != ResponseCode.SUCCESSFUL:
        raise ValidationError(
            f"Response code was {response_code}",
            code=VerificationOutcome.NOT_SUCCESSFUL.value,
        )

    message = build_response_message(payload)
    calculated_hash = generate_hmac_sha512(message, secret_key)
    if not calculated_hash:
        raise ValidationError(
            "Failed to generate hash for response verification.",
            code=VerificationOutcome.HASH_FAILED.value,
        )

    calculated_dv = decode_hex_digest(calculated_hash)
    received_dv = decode_hex_digest(payload.get(DV_FIELD))
    if not digests_match(calculated_dv, received_dv):
        raise ValidationError("DV does not match response data.", code=VerificationOutcome.MISMATCH.value)


def evaluate_response(payload, secret_key) -> VerificationResult:
    """
    Verify a Fonepay redirect response and report which check decided it.

    Never raises: every failure is logged and returned as a non-ok result.
    The secret key and digest bytes are never logged.
    """
    prn = ""
    try:
        prn = _payload_prn(payload)
        _verify_or_raise(payload, secret_key)
    except ValidationError as exc:
        detail = exc.messages[0] if getattr(exc, "messages", None) else str(exc)
        try:
            outcome = VerificationOutcome(exc.code)
        except ValueError:
            outcome = VerificationOutcome.INVALID_INPUT
        if outcome is VerificationOutcome.NOT_SUCCESSFUL:
            logger.info(
                "fonepay_verify.rejected reason=%s prn=%s detail=%s",
                outcome.value,
                prn,
                detail,
            )
        else:
            logger.error(
                "fonepay_verify.failed reason=%s prn=%s detail=%s",
                outcome.value,
                prn,
                detail,
            )
        return VerificationResult(ok=False, outcome=outcome, prn=prn)
    except Exception as exc:  # noqa: BLE001 - fail closed
        logger.error(
            "fonepay_verify.failed reason=%s prn=%s error=%s",
            VerificationOutcome.INVALID_INPUT.value,
            prn,
            exc.__class__.__name__,
        )
        return VerificationResult(ok=False, outcome=VerificationOutcome.INVALID_INPUT, prn=prn)

    logger.info("fonepay_verify.accepted prn=%s", prn)
    return VerificationResult(ok=True, outcome=VerificationOutcome.VERIFIED, prn=prn)


def verify_response(payload, secret_key) -> bool:
    return evaluate_response(payload, secret_key).ok
