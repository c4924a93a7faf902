from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee (empleado) belonging to an area."""

    employee_id: int
    full_name: str
    document: str
    area_id: Optional[int]
    shift_id: Optional[int]
    is_active: bool = True
