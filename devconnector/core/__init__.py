from .database import init_db, close_db, get_db_session, get_motor_client
from .config import settings, setup_logging
from .exceptions import (
    custom_http_exception_handler,
    validation_exception_handler,
    profile_service_exception_handler,
    unhandled_exception_handler,
)


__all__ = [
    "settings",
    "init_db",
    "close_db",
    "get_db_session",
    "get_motor_client",
    "setup_logging",
    "custom_http_exception_handler",
    "validation_exception_handler",
    "profile_service_exception_handler",
    "unhandled_exception_handler",
]
