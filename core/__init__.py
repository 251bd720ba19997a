# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the booking/contact business logic:
# - models/: Pydantic schemas for records and API payloads
# - repositories/: Append-only storage interface and in-memory backend
# - services/: Validation + persistence + notification per feature
#
# Code in this package doesn't know about routes or requests; it only
# raises the API's exception types so the HTTP layer can map them.
# =============================================================================
