from .base import LOGGING
from .base import *  # noqa: F403

# Keep tests self-contained: fixed credentials, dev gateway.
FEATURE_FLAGS = {"payments": True}
PAYMENTS_PROVIDER_ENABLED_FONEPAY = True

FONEPAY_MERCHANT_CODE = "M001"
FONEPAY_SECRET_KEY = "s3cr3t"
FONEPAY_RETURN_URL = "https://merchant.example.test/fonepay/return/"
FONEPAY_PRODUCTION = False

LOGGING["root"]["handlers"] = ["console"]
LOGGING["loggers"]["apps"]["handlers"] = ["console"]
