from .router.health import health_check
from .router.v1 import v1_router
from .middleware import RequestIDMiddleware

__all__ = ["health_check", "v1_router", "RequestIDMiddleware"]
