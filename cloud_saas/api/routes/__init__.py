from .auth_controller import router as auth_router
from .contact_controller import router as contact_router
from .error_handlers import register_exception_handlers


__all__ = ["auth_router", "contact_router", "register_exception_handlers"]
