"""
scrapco_admin.services

Service-layer package.

Responsibilities:
- Validate admin input and own the persistence decisions for each resource.
- Translate data service rejections into the shared error taxonomy.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend only on the `DataService` protocol, so tests run them against fakes.
