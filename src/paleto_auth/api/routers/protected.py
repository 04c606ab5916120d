from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from paleto_auth.auth.deps import require_role
from paleto_auth.auth.models import SessionIdentity
from paleto_auth.auth.roles import Role

router = APIRouter(prefix="/api", tags=["protected"])


@router.get("/employees")
async def employees(
    identity: SessionIdentity = Depends(require_role(Role.employee)),
) -> dict[str, Any]:
    return {"resource": "employees", "viewer": identity.id, "role": identity.role}


@router.get("/recruitment")
async def recruitment(
    identity: SessionIdentity = Depends(require_role(Role.rh)),
) -> dict[str, Any]:
    return {"resource": "recruitment", "viewer": identity.id, "role": identity.role}


@router.post("/admin/action")
async def admin_action(
    identity: SessionIdentity = Depends(require_role(Role.admin)),
) -> dict[str, Any]:
    return {"success": True, "performedBy": identity.id}
