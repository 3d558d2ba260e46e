# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the FestiFind API:
# - test_models.py: Festival model and command parsing
# - test_supabase_client.py: Store selection, live and mock stores
# - test_festival_service.py: Service-level error mapping and listing
# - test_festival_routes.py: Endpoint behavior against an in-memory store
# - test_health.py: Health and readiness endpoints
#
# Run tests with: pytest
# =============================================================================
