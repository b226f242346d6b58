"""
scrapco_admin.data_service

Data service boundary package.

Responsibilities:
- Client for the remote relational store (rows) and identity verifier.
- Factory that scopes client handles to a logical project and credential.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on the `DataService` protocol, never on HTTP details.
