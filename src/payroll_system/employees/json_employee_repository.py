from __future__ import annotations

import dataclasses
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import JSON_INDENT
from ..core.exceptions import StorageError
from .model import Employee, patch_fields
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonEmployeeRepository(EmployeeRepository):
    """Employee collection stored as one JSON array in a single file.

    Every mutation reads the whole document and rewrites it. There is no
    locking: overlapping writers can lose updates (last writer wins).
    """

    def __init__(self, path: str | os.PathLike[str]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _file_mode(self) -> int:
        """Mode for the rewritten file: the current one, else the umask default."""
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def read_all(self) -> list[Employee]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("%s not found, creating an empty collection", self._path)
            self.write_all([])
            return []
        except OSError as e:
            logger.error("Error reading %s: %s", self._path, e)
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Error parsing %s: %s", self._path, e)
            raise StorageError(f"Invalid JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            logger.error("Error parsing %s: top-level value is not an array", self._path)
            raise StorageError(f"{self._path} does not contain a JSON array")

        try:
            employees = [Employee.from_dict(item) for item in data]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Error parsing %s: bad employee record: %s", self._path, e)
            raise StorageError(f"Malformed employee record in {self._path}: {e}") from e

        logger.debug("Loaded %d employee(s) from %s", len(employees), self._path)
        return employees

    def write_all(self, employees: Sequence[Employee]) -> None:
        payload = json.dumps([e.to_dict() for e in employees], indent=JSON_INDENT, ensure_ascii=False)
        directory = self._path.parent

        tmp_name: Optional[str] = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            # Sibling temp file + os.replace: readers only ever see a complete document.
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=f".{self._path.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                f.write(payload)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.error("Error writing %s: %s", self._path, e)
            raise StorageError(f"Cannot write {self._path}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Wrote %d employee(s) to %s", len(employees), self._path)

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        for employee in self.read_all():
            if employee.id == int(employee_id):
                return employee
        return None

    def add_employee(self, employee: Employee) -> None:
        employees = self.read_all()
        employees.append(employee)
        self.write_all(employees)

    def update_employee(self, employee_id: int, patch: Mapping[str, Any]) -> bool:
        changes = patch_fields(patch)
        employees = self.read_all()
        for idx, employee in enumerate(employees):
            if employee.id == int(employee_id):
                employees[idx] = dataclasses.replace(employee, **changes)
                self.write_all(employees)
                return True
        return False

    def delete_employee(self, employee_id: int) -> bool:
        employees = self.read_all()
        remaining = [e for e in employees if e.id != int(employee_id)]
        if len(remaining) == len(employees):
            return False

        self.write_all(remaining)
        return True
