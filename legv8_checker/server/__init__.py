"""HTTP API for the LEGv8 syntax checker (FastAPI + pydantic)."""
