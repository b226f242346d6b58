"""
scrapco_admin.auth.models

Auth domain models.

Responsibilities:
- Define the stored role vocabulary (`Role`).
- Define the verified caller identity and the role-checked `Principal`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Role(enum.StrEnum):
    admin = "admin"

    @classmethod
    def parse(cls, raw: object) -> Role | None:
        # Stored roles are free text; compare case-insensitively, unknown -> None.
        try:
            return cls(str(raw or "").lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class VerifiedIdentity:
    user_id: str


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller whose stored role has been checked.
    """

    user_id: str
    role: Role

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles

    @property
    def is_admin(self) -> bool:
        return self.has_role(Role.admin)


# --- Module Notes -----------------------------------------------------------
# New roles are added to `Role`; routes opt in through `auth.deps.require_roles`.
