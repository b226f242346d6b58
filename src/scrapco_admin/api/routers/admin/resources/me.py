from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from scrapco_admin.auth.deps import require_admin
from scrapco_admin.auth.models import Principal

router = APIRouter()


@router.get("/me")
async def whoami(principal: Principal = Depends(require_admin)) -> dict[str, Any]:
    return {"success": True, "isAdmin": principal.is_admin, "userId": principal.user_id}
