from .config import settings
from .log_config import setup_logging
from .exception_handlers import register_exception_handlers

__all__ = ["settings", "setup_logging", "register_exception_handlers"]
