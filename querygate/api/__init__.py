"""API Layer: FastAPI integration for apps that surface loader failures over HTTP."""
