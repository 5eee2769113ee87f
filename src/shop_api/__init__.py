"""Shop API - FastAPI application."""
