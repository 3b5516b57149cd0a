"""
Presentation Layer - HTTP API.

FastAPI routers, request/response schemas and dependency wiring.
"""
