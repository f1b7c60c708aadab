"""FastAPI application and HTTP wiring."""
