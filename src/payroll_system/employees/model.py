from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

# On-disk key -> dataclass field name.
FIELD_ALIASES = {"startDate": "start_date", "basicSalary": "salary"}
PATCHABLE_FIELDS = frozenset({"name", "department", "salary", "gender", "start_date"})
KNOWN_KEYS = frozenset({"id", "name", "gender", "department", "salary", "basicSalary", "startDate"})


@dataclass(frozen=True)
class Employee:
    """Domain entity: one payroll record.

    Plain data object; the JSON layout is owned by ``to_dict``/``from_dict``.
    Keys this version does not model are carried in ``extra`` and written back.
    """

    id: int
    name: str
    department: str
    salary: float
    gender: Optional[str] = None
    start_date: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "name": self.name,
            "gender": self.gender,
            "department": self.department,
            "salary": self.salary,
            "startDate": self.start_date,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        salary = data.get("salary", data.get("basicSalary", 0))
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            department=str(data.get("department") or ""),
            salary=float(salary or 0),
            gender=data.get("gender") or None,
            start_date=data.get("startDate") or None,
            extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
        )


def patch_fields(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a patch to dataclass field names; ``id`` is never patched."""
    changes: dict[str, Any] = {}
    for key, value in patch.items():
        name = FIELD_ALIASES.get(key, key)
        if name == "id":
            continue
        if name not in PATCHABLE_FIELDS:
            raise ValueError(f"Unknown employee field: {key!r}")
        changes[name] = value
    return changes
