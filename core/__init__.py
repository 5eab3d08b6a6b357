# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the application and storage layers:
# - models/: Pydantic schemas for data validation
# - repositories/: Parameterized SQL for each table
# - services/: Business rules on top of the repositories
# - database.py: Async engine (connection pool) factory
# - migrations.py: Versioned SQL migration runner
#
# Routers call services; services call repositories. Nothing here touches
# request or response objects.
# =============================================================================
