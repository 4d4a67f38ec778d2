"""External-facing routers.

- system_router: non-versioned root and health endpoints
- v1_router: versioned product catalog API
"""

from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.system import system_router

__all__ = ["system_router", "v1_router"]
