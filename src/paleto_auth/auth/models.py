"""
paleto_auth.auth.models

Auth domain models.

Responsibilities:
- Define the session identity snapshot stored server-side at login.
- Shape it for the browser-facing JSON contract.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from paleto_auth.auth.roles import Role, role_level


@dataclass(frozen=True, slots=True)
class SessionIdentity:
    """
    Snapshot of who logged in and which role they resolved to.

    `employee_name`/`grade` are set in sheet mode, `role_ids` in guild mode;
    they are kept for display and audit only.
    """

    id: str
    username: str
    discriminator: str
    avatar_url: str
    role: str
    employee_name: str | None = None
    grade: str | None = None
    role_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def level(self) -> int:
        return role_level(self.role)

    def has_at_least(self, minimum: Role) -> bool:
        return self.level >= minimum.level

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["role_ids"] = list(self.role_ids)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionIdentity:
        return cls(
            id=str(data["id"]),
            username=str(data.get("username", "")),
            discriminator=str(data.get("discriminator", "0")),
            avatar_url=str(data.get("avatar_url", "")),
            role=str(data.get("role", Role.visitor)),
            employee_name=data.get("employee_name"),
            grade=data.get("grade"),
            role_ids=tuple(data.get("role_ids") or ()),
        )

    def to_public(self) -> dict[str, Any]:
        # Field names match what the frontend already consumes.
        out: dict[str, Any] = {
            "id": self.id,
            "username": self.username,
            "discriminator": self.discriminator,
            "avatar": self.avatar_url,
            "role": self.role,
        }
        if self.employee_name is not None:
            out["employeeName"] = self.employee_name
        if self.grade is not None:
            out["grade"] = self.grade
        if self.role_ids:
            out["roleIds"] = list(self.role_ids)
        return out
