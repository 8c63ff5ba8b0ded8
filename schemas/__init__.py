"""
schemas/ - Request Schemas
==========================
Pydantic models describing the shape of incoming request bodies.
"""
