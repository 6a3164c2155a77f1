"""API tests exercising the FastAPI applications through TestClient."""
