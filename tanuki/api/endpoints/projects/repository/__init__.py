"""Project repository API endpoints."""
