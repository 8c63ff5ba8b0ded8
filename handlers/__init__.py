"""
handlers/ - HTTP Layer
======================
FastAPI routers, dependencies and exception handlers.
Handlers translate HTTP requests into repository calls and map
database errors to HTTP responses.
"""
