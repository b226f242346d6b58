"""
scrapco_admin.auth

Authentication/authorization package.

Responsibilities:
- Role vocabulary and the role-checked `Principal`.
- FastAPI admin gate (feature flag, bearer verification, role lookup).
"""

# Package marker.
