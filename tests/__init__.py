# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the WellnessHub API:
# - test_validation.py: Email/password/required-field predicates
# - test_security.py: Password hashing and bearer tokens
# - test_repositories.py: In-memory repository and id generation
# - test_services.py: Registration, login, bookings, newsletter, admin summary
# - test_notifications.py: Notification rendering and delivery outcomes
# - test_api.py: End-to-end HTTP tests through TestClient
#
# Run tests with: pytest
# =============================================================================
