# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains business logic:
# - models/: Pydantic schemas for festivals, commands and response envelopes
# - services/: Festival listing and preference updates
#
# Code in this package does not import FastAPI; it raises the API exceptions
# and leaves turning them into responses to the app layer.
# =============================================================================
