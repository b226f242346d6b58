"""
scrapco_admin.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation and last-resort error translation.
"""

# Package marker.
