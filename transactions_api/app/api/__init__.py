"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules from ``api.endpoints``;
``deps`` holds the FastAPI dependencies shared between them.
"""
