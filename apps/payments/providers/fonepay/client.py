from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ValidationError

from apps.payments.feature_flag import provider_enabled

from . import VerificationResult
from .config import FonepayConfig
from .payment_url import build_payment_url, build_request_params
from .verify import evaluate_response, verify_response


class FonepayClient:
    def __init__(self, config: FonepayConfig) -> None:
        self.config = config

    def request_params(self, **kwargs) -> dict[str, str]:
        return build_request_params(self.config, **kwargs)

    def payment_url(self, **kwargs) -> str:
        return build_payment_url(self.config, **kwargs)

    def verify(self, payload) -> bool:
        return verify_response(payload, self.config.secret_key)

    def evaluate(self, payload) -> VerificationResult:
        return evaluate_response(payload, self.config.secret_key)


def _get_setting_value(name: str) -> str:
    return str(getattr(settings, name, "") or "").strip()


def get_fonepay_client() -> FonepayClient:
    if not provider_enabled("fonepay"):
        raise ValidationError("Fonepay disabled.")
    return FonepayClient(
        FonepayConfig(
            merchant_code=_get_setting_value("FONEPAY_MERCHANT_CODE"),
            # keys are used verbatim; surrounding whitespace is part of the secret
            secret_key=str(getattr(settings, "FONEPAY_SECRET_KEY", "") or ""),
            return_url=_get_setting_value("FONEPAY_RETURN_URL"),
            production=bool(getattr(settings, "FONEPAY_PRODUCTION", False)),
        )
    )
