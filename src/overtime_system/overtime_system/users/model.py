from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an administrator or area coordinator.

    Plain data object; credentials live with the authentication layer.
    """

    user_id: int
    full_name: str
    username: str
    role: Role
    area_id: Optional[int]
    is_active: bool = True

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def can_manage_area(self, area_id: Optional[int]) -> bool:
        return self.is_admin() or (self.area_id is not None and self.area_id == area_id)
