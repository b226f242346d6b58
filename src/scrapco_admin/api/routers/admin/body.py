"""
scrapco_admin.api.routers.admin.body

JSON body parsing for admin endpoints.

The body is read inside a dependency that itself depends on `require_admin`, so
a malformed payload is only reported to callers that already passed the gate.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from scrapco_admin.auth.deps import require_admin
from scrapco_admin.auth.models import Principal

M = TypeVar("M", bound=BaseModel)


def admin_body(model: type[M]):
    async def _dep(request: Request, _: Principal = Depends(require_admin)) -> M | None:
        raw = await request.body()
        if not raw.strip():
            return None
        try:
            return model.model_validate_json(raw)
        except PydanticValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    return _dep
