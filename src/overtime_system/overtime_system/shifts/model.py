from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work shift (turno) owned by an area."""

    shift_id: int
    name: str
    area_id: Optional[int] = None
    is_active: bool = True
