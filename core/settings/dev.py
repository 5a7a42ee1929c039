from .base import LOGGING
from .base import *  # noqa

DEBUG = True
ALLOWED_HOSTS = ["*"]
LOGGING["loggers"]["apps"]["handlers"] = ["console"]  # type: ignore[index]
