"""FastAPI interface package."""
