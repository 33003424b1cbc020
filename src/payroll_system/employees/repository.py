from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee collection.

    The service layer depends on this interface, not on the JSON file.
    """

    def read_all(self) -> list[Employee]:
        raise NotImplementedError

    def write_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def add_employee(self, employee: Employee) -> None:
        raise NotImplementedError

    def update_employee(self, employee_id: int, patch: Mapping[str, Any]) -> bool:
        """Merge ``patch`` over the stored record.

        Returns False (and writes nothing) when the id is unknown. Keys may be
        field names or their on-disk names; anything else raises ValueError.
        """

        raise NotImplementedError

    def delete_employee(self, employee_id: int) -> bool:
        raise NotImplementedError
