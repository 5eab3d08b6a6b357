# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Person API:
# - test_models.py: Pydantic model validation and serialization
# - test_validation.py: Request body / path parameter decoding
# - test_person_service.py: Service against a real SQLite file
# - test_migrations.py: Migration runner
# - test_api.py: HTTP endpoints through TestClient
# - test_config.py / test_main.py: Settings and bootstrap
#
# Run tests with: pytest
# =============================================================================
