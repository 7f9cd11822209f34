"""
campus_coffee.api

HTTP API package (FastAPI).

Responsibilities:
- Build the ASGI app and expose the POS endpoints.
"""

# Package marker.
