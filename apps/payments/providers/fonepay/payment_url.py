from __future__ import annotations

import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from urllib.parse import urlencode

from django.core.exceptions import ValidationError
from django.utils import timezone

from . import DV_FIELD, REQUEST_FIELD_ORDER
from .config import FonepayConfig
from .hashing import generate_hmac_sha512

PAYMENT_MODE = "P"
DEFAULT_CURRENCY = "NPR"
DEFAULT_REMARK = "N/A"
PRN_MIN_LENGTH = 3
PRN_MAX_LENGTH = 25
REMARK_MAX_LENGTH = 160


def _format_amount(raw_amount) -> str:
    if raw_amount in (None, "") or isinstance(raw_amount, bool):
        raise ValidationError("Payment amount is required.")
    if isinstance(raw_amount, float):
        raw_amount = str(raw_amount)
    try:
        value = Decimal(raw_amount)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValidationError("Payment amount is invalid.") from exc
    if not value.is_finite():
        raise ValidationError("Payment amount is invalid.")
    value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if value <= 0:
        raise ValidationError("Payment amount must be positive.")
    return str(value)


def _clean_prn(prn) -> str:
    prn = str(prn or "").strip()
    if not prn:
        raise ValidationError("PRN is required.")
    if not PRN_MIN_LENGTH <= len(prn) <= PRN_MAX_LENGTH:
        raise ValidationError(f"PRN must be between {PRN_MIN_LENGTH} and {PRN_MAX_LENGTH} characters.")
    return prn


def _clean_remark(value, name: str, *, required: bool) -> str:
    value = str(value or "").strip()
    if not value:
        if required:
            raise ValidationError(f"{name} is required.")
        value = DEFAULT_REMARK
    if len(value) > REMARK_MAX_LENGTH:
        raise ValidationError(f"{name} must be at most {REMARK_MAX_LENGTH} characters.")
    return value


def build_request_params(
    config: FonepayConfig,
    *,
    prn: str,
    amount,
    remarks1: str,
    remarks2: str = DEFAULT_REMARK,
    return_url: str | None = None,
    currency: str = DEFAULT_CURRENCY,
    date: datetime.date | None = None,
) -> dict[str, str]:
    return_url = str(return_url or config.return_url or "").strip()
    if not return_url:
        raise ValidationError("Return URL is required.")
    currency = str(currency or "").strip().upper()
    if not currency:
        raise ValidationError("currency is required.")

    params = {
        "PID": config.merchant_code,
        "MD": PAYMENT_MODE,
        "PRN": _clean_prn(prn),
        "AMT": _format_amount(amount),
        "CRN": currency,
        "DT": (date or timezone.localdate()).strftime("%m/%d/%Y"),
        "R1": _clean_remark(remarks1, "R1", required=True),
        "R2": _clean_remark(remarks2, "R2", required=False),
        "RU": return_url,
    }
    message = ",".join(params[key] for key in REQUEST_FIELD_ORDER)
    params[DV_FIELD] = generate_hmac_sha512(message, config.secret_key)
    return params


def build_payment_url(config: FonepayConfig, **kwargs) -> str:
    """Gateway redirect URL for a new payment; see ``build_request_params``."""
    params = build_request_params(config, **kwargs)
    return f"{config.base_url}?{urlencode(params)}"
