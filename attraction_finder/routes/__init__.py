"""
FastAPI routers for all API endpoints.

Each module defines a router for one area (attractions, geolocation, health).
Routers only validate input, call the service layer, and translate service
errors into HTTP responses.
"""
