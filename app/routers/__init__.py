# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - festivals.py: Festival listing and preference update endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import festivals

__all__ = [
    "health",
    "festivals",
]
