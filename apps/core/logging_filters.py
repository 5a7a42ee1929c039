from __future__ import annotations

import logging

REDACTED_ATTRS = (
    "request",
    "request_body",
    "data",
    "body",
    "payload",
    "secret_key",
    "DV",
    "dv",
)


class RedactSecretsFilter(logging.Filter):
    """
    Drop request bodies, gateway payloads and key material from log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        for attr in REDACTED_ATTRS:
            if hasattr(record, attr):
                setattr(record, attr, None)
        return True
