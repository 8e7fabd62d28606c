from .health import router as health_router
from .voicemail import method_not_allowed_handler
from .voicemail import router as voicemail_router

__all__ = ["health_router", "voicemail_router", "method_not_allowed_handler"]
