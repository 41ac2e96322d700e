"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler decodes the JSON request, delegates to the
appropriate Service, and turns the outcome into an HTTP response.
No business logic lives here.
"""
