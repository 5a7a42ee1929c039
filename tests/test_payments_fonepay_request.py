from __future__ import annotations

import datetime
import hashlib
import hmac
from decimal import Decimal
from urllib.parse import parse_qs, urlsplit

import pytest
from django.core.exceptions import ValidationError

from apps.payments.providers.fonepay.config import DEV_BASE_URL, PRODUCTION_BASE_URL, FonepayConfig
from apps.payments.providers.fonepay.hashing import generate_hmac_sha512
from apps.payments.providers.fonepay.payment_url import build_payment_url, build_request_params

RETURN_URL = "https://merchant.example.test/fonepay/return/"


def _config(**overrides) -> FonepayConfig:
    values = {
        "merchant_code": "M001",
        "secret_key": "s3cr3t",
        "return_url": RETURN_URL,
        "production": False,
    }
    values.update(overrides)
    return FonepayConfig(**values)


def test_generate_hmac_sha512_matches_hmac_module():
    expected = hmac.new(b"s3cr3t", b"hello,world", hashlib.sha512).hexdigest()
    assert generate_hmac_sha512("hello,world", "s3cr3t") == expected
    assert len(expected) == 128


def test_generate_hmac_sha512_requires_key():
    with pytest.raises(ValidationError) as excinfo:
        generate_hmac_sha512("hello", "")
    assert excinfo.value.code == "hash_failed"


def test_config_requires_credentials():
    with pytest.raises(ValidationError):
        _config(merchant_code="  ")
    with pytest.raises(ValidationError):
        _config(secret_key="")


def test_config_repr_hides_secret():
    assert "s3cr3t" not in repr(_config())


def test_config_base_url_follows_environment():
    assert _config().base_url == DEV_BASE_URL
    assert _config(production=True).base_url == PRODUCTION_BASE_URL


def test_request_params_are_signed_in_gateway_order():
    params = build_request_params(
        _config(),
        prn="ORDER1",
        amount=100,
        remarks1="Order 1",
        date=datetime.date(2024, 3, 5),
    )
    assert params["PID"] == "M001"
    assert params["MD"] == "P"
    assert params["AMT"] == "100.00"
    assert params["CRN"] == "NPR"
    assert params["DT"] == "03/05/2024"
    assert params["R2"] == "N/A"
    assert params["RU"] == RETURN_URL
    message = f"M001,P,ORDER1,100.00,NPR,03/05/2024,Order 1,N/A,{RETURN_URL}"
    assert params["DV"] == generate_hmac_sha512(message, "s3cr3t")


def test_payment_url_encodes_params():
    url = build_payment_url(
        _config(production=True),
        prn="ORDER1",
        amount=Decimal("10.5"),
        remarks1="Order 1",
        remarks2="Gift & wrap",
        return_url="https://shop.example.test/return/?src=app",
        date=datetime.date(2024, 12, 31),
    )
    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == PRODUCTION_BASE_URL
    query = {key: values[0] for key, values in parse_qs(parts.query).items()}
    assert query["AMT"] == "10.50"
    assert query["R2"] == "Gift & wrap"
    assert query["RU"] == "https://shop.example.test/return/?src=app"
    assert query["DT"] == "12/31/2024"
    assert len(query["DV"]) == 128


def test_payment_date_defaults_to_today():
    params = build_request_params(_config(), prn="ORDER1", amount="5", remarks1="r")
    assert datetime.datetime.strptime(params["DT"], "%m/%d/%Y")


@pytest.mark.parametrize("amount", [0, "-1", "abc", None, "", "NaN", True])
def test_invalid_amount_rejected(amount):
    with pytest.raises(ValidationError):
        build_request_params(_config(), prn="ORDER1", amount=amount, remarks1="r")


@pytest.mark.parametrize("prn", ["", "ab", "x" * 26])
def test_invalid_prn_rejected(prn):
    with pytest.raises(ValidationError):
        build_request_params(_config(), prn=prn, amount=10, remarks1="r")


def test_remarks_validated():
    with pytest.raises(ValidationError):
        build_request_params(_config(), prn="ORDER1", amount=10, remarks1="")
    with pytest.raises(ValidationError):
        build_request_params(_config(), prn="ORDER1", amount=10, remarks1="r", remarks2="x" * 161)


def test_return_url_required():
    with pytest.raises(ValidationError):
        build_request_params(_config(return_url=""), prn="ORDER1", amount=10, remarks1="r")
