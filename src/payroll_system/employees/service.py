from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from ..common.datetime_utils import now_millis
from ..common.validators import optional_iso_date, optional_text, require_non_empty, require_non_negative_number
from ..core.constants import FORM_ERROR_MESSAGE
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeForm:
    """Validated, normalised add/edit form values."""

    name: str
    department: str
    salary: float
    gender: Optional[str] = None
    start_date: Optional[str] = None

    def as_patch(self) -> dict:
        return {
            "name": self.name,
            "gender": self.gender,
            "department": self.department,
            "salary": self.salary,
            "start_date": self.start_date,
        }


def validate_employee_form(
    *,
    name: Optional[str],
    department: Optional[str],
    salary: Optional[str],
    gender: Optional[str] = None,
    start_date: Optional[str] = None,
) -> EmployeeForm:
    try:
        return EmployeeForm(
            name=require_non_empty(name, "Name"),
            department=require_non_empty(department, "Department"),
            salary=require_non_negative_number(salary, "Salary"),
            gender=optional_text(gender),
            start_date=optional_iso_date(start_date, "Start date"),
        )
    except ValidationError as e:
        raise ValidationError(f"{FORM_ERROR_MESSAGE} {e}") from e


class IdGenerator:
    """Millisecond-timestamp ids, strictly increasing within one process.

    Two processes writing the same file can still collide.
    """

    def __init__(self, clock: Callable[[], int] = now_millis):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            value = max(int(self._clock()), self._last + 1)
            self._last = value
            return value


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, employees: EmployeeRepository, *, id_generator: Optional[Callable[[], int]] = None):
        self._employees = employees
        self._next_id = id_generator or IdGenerator()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.find_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create_employee(
        self,
        *,
        name: Optional[str],
        department: Optional[str],
        salary: Optional[str],
        gender: Optional[str] = None,
        start_date: Optional[str] = None,
    ) -> Employee:
        form = validate_employee_form(
            name=name, department=department, salary=salary, gender=gender, start_date=start_date
        )
        employee = Employee(id=self._next_id(), **form.as_patch())
        self._employees.add_employee(employee)
        logger.info("Added employee %s (%s)", employee.id, employee.name)
        return employee

    def update_employee(
        self,
        employee_id: int,
        *,
        name: Optional[str],
        department: Optional[str],
        salary: Optional[str],
        gender: Optional[str] = None,
        start_date: Optional[str] = None,
    ) -> None:
        form = validate_employee_form(
            name=name, department=department, salary=salary, gender=gender, start_date=start_date
        )
        if not self._employees.update_employee(employee_id, form.as_patch()):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Updated employee %s", employee_id)

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_employee(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("Deleted employee %s", employee_id)
