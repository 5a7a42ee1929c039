from __future__ import annotations

from dataclasses import dataclass, field

from django.core.exceptions import ValidationError

PRODUCTION_BASE_URL = "https://clientapi.fonepay.com/api/merchantRequest"
DEV_BASE_URL = "https://dev-clientapi.fonepay.com/api/merchantRequest"


@dataclass(frozen=True)
class FonepayConfig:
    merchant_code: str
    secret_key: str = field(repr=False)
    return_url: str = ""
    production: bool = False

    def __post_init__(self) -> None:
        if not str(self.merchant_code or "").strip():
            raise ValidationError("FONEPAY_MERCHANT_CODE is required.")
        if not isinstance(self.secret_key, str) or not self.secret_key:
            raise ValidationError("FONEPAY_SECRET_KEY is required.")

    @property
    def base_url(self) -> str:
        return PRODUCTION_BASE_URL if self.production else DEV_BASE_URL
