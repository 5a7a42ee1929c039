from __future__ import annotations

from django.conf import settings


def payments_enabled() -> bool:
    flags = getattr(settings, "FEATURE_FLAGS", {})
    return flags.get("payments", False)


def provider_enabled(provider: str) -> bool:
    if not payments_enabled():
        return False
    return bool(getattr(settings, f"PAYMENTS_PROVIDER_ENABLED_{provider.upper()}", False))
