"""
scrapco_admin.api

API package for the ScrapCo admin service.

Responsibilities:
- FastAPI app factory, router modules and error handlers.
- API-layer dependency wiring and request body models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + auth + delegation to services.
