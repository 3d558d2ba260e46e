# =============================================================================
# core/services/ - Business Logic Services
# =============================================================================
# Services contain business logic separated from HTTP concerns.
# Routers call services, services call the festival store.
# =============================================================================

from .festival_service import FestivalService

__all__ = [
    "FestivalService",
]
