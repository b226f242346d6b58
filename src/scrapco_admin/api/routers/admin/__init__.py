"""
scrapco_admin.api.routers.admin

Admin router package.

Responsibilities:
- Mount every admin resource router under `/api/admin` behind the admin gate.
"""

# Package marker.
