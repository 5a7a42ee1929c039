from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResponseCode:
    SUCCESSFUL = "successful"
    FAILED = "failed"
    CANCEL = "cancel"


# Field order of the gateway's DV message. Changing it breaks verification.
RESPONSE_FIELD_ORDER: tuple[str, ...] = (
    "PRN",
    "PID",
    "PS",
    "RC",
    "UID",
    "BC",
    "INI",
    "P_AMT",
    "R_AMT",
)

REQUEST_FIELD_ORDER: tuple[str, ...] = (
    "PID",
    "MD",
    "PRN",
    "AMT",
    "CRN",
    "DT",
    "R1",
    "R2",
    "RU",
)

DV_FIELD = "DV"


class VerificationOutcome(str, Enum):
    VERIFIED = "verified"
    NOT_SUCCESSFUL = "payment_not_successful"
    INVALID_INPUT = "invalid_input"
    MISSING_FIELDS = "missing_fields"
    HASH_FAILED = "hash_failed"
    INVALID_DIGEST = "invalid_digest"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    outcome: VerificationOutcome
    prn: str = ""

    def __bool__(self) -> bool:
        return self.ok
