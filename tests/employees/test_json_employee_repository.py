from __future__ import annotations

import json
import os
import stat

import pytest

from payroll_system.core.exceptions import StorageError
from payroll_system.employees.json_employee_repository import JsonEmployeeRepository
from payroll_system.employees.model import Employee


def _emp(employee_id: int, name: str = "A", department: str = "Eng", salary: float = 1000) -> Employee:
    return Employee(id=employee_id, name=name, department=department, salary=salary)


def test_missing_file_is_created_as_empty_array(data_file):
    repo = JsonEmployeeRepository(data_file)

    assert repo.read_all() == []
    assert data_file.exists()
    assert json.loads(data_file.read_text(encoding="utf-8")) == []


def test_write_then_read_preserves_order_and_fields(data_file):
    repo = JsonEmployeeRepository(data_file)
    employees = [
        Employee(id=3, name="Zoë", department="Ops", salary=1500.5, gender="Female", start_date="2024-01-02"),
        _emp(1),
    ]

    repo.write_all(employees)
    repo.write_all(repo.read_all())

    assert repo.read_all() == employees


def test_document_is_pretty_printed_utf8_array(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([Employee(id=1, name="Zoë", department="Ops", salary=10, start_date="2024-01-02")])

    text = data_file.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n    \"id\": 1,")
    assert "Zoë" in text
    assert json.loads(text)[0]["startDate"] == "2024-01-02"


def test_reads_basic_salary_alias(data_file):
    data_file.write_text(json.dumps([{"id": 7, "name": "A", "department": "Eng", "basicSalary": 250}]), encoding="utf-8")

    assert JsonEmployeeRepository(data_file).read_all() == [Employee(id=7, name="A", department="Eng", salary=250)]


@pytest.mark.parametrize("content", ["{not json", '{"id": 1}', '[{"name": "no id"}]'])
def test_corrupt_document_raises_storage_error(data_file, content):
    data_file.write_text(content, encoding="utf-8")

    with pytest.raises(StorageError):
        JsonEmployeeRepository(data_file).read_all()


def test_write_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(StorageError):
        JsonEmployeeRepository(blocker / "employees.json").write_all([])


def test_find_by_id(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([_emp(1, "A"), _emp(2, "B")])

    assert repo.find_by_id(2).name == "B"
    assert repo.find_by_id(99) is None


def test_add_employee_appends(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.add_employee(_emp(1, "A"))
    repo.add_employee(_emp(2, "B"))

    assert [e.name for e in repo.read_all()] == ["A", "B"]


def test_update_merges_patch_and_keeps_other_fields(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([Employee(id=1, name="A", department="Eng", salary=1000, gender="Male")])

    assert repo.update_employee(1, {"department": "Ops", "id": 555}) is True

    assert repo.read_all() == [Employee(id=1, name="A", department="Ops", salary=1000, gender="Male")]


def test_update_missing_id_returns_false_and_does_not_write(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([_emp(1)])
    before = data_file.read_bytes()
    mtime = data_file.stat().st_mtime_ns

    assert repo.update_employee(99, {"name": "X"}) is False

    assert data_file.read_bytes() == before
    assert data_file.stat().st_mtime_ns == mtime


def test_delete_removes_matching_record(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([_emp(1, "A"), _emp(2, "B")])

    assert repo.delete_employee(1) is True
    assert [e.id for e in repo.read_all()] == [2]


def test_delete_missing_id_leaves_collection_unchanged(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([_emp(1, "A"), _emp(2, "B")])
    before = repo.read_all()

    assert repo.delete_employee(99) is False
    assert repo.read_all() == before


def test_no_temp_files_left_behind(tmp_path):
    repo = JsonEmployeeRepository(tmp_path / "employees.json")
    repo.write_all([_emp(1)])
    repo.add_employee(_emp(2))

    assert sorted(p.name for p in tmp_path.iterdir()) == ["employees.json"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
@pytest.mark.parametrize("mode", [0o644, 0o640])
def test_rewrite_keeps_file_mode(data_file, mode):
    data_file.write_text("[]", encoding="utf-8")
    os.chmod(data_file, mode)

    JsonEmployeeRepository(data_file).add_employee(_emp(1))

    assert stat.S_IMODE(data_file.stat().st_mode) == mode


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_new_file_gets_umask_default_mode(data_file):
    umask = os.umask(0o022)
    try:
        JsonEmployeeRepository(data_file).read_all()
    finally:
        os.umask(umask)

    assert stat.S_IMODE(data_file.stat().st_mode) == 0o644


def test_unmodelled_keys_survive_rewrites(data_file):
    data_file.write_text(
        json.dumps([{"id": 1, "name": "A", "department": "Eng", "salary": 10, "email": "a@x"}]), encoding="utf-8"
    )
    repo = JsonEmployeeRepository(data_file)

    repo.add_employee(_emp(2))
    repo.update_employee(1, {"department": "Ops"})

    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert stored[0]["email"] == "a@x"
    assert stored[0]["department"] == "Ops"
    assert "email" not in stored[1]


def test_basic_salary_alias_is_not_written_back(data_file):
    data_file.write_text(json.dumps([{"id": 7, "name": "A", "department": "Eng", "basicSalary": 250}]), encoding="utf-8")
    repo = JsonEmployeeRepository(data_file)

    repo.write_all(repo.read_all())

    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert stored == [{"id": 7, "name": "A", "gender": None, "department": "Eng", "salary": 250.0, "startDate": None}]


def test_update_accepts_on_disk_key_names(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([_emp(1)])

    assert repo.update_employee(1, {"startDate": "2024-01-02", "basicSalary": 99}) is True

    assert repo.find_by_id(1) == Employee(id=1, name="A", department="Eng", salary=99, start_date="2024-01-02")


def test_update_with_unknown_field_raises_value_error(data_file):
    repo = JsonEmployeeRepository(data_file)
    repo.write_all([_emp(1)])
    before = data_file.read_bytes()

    with pytest.raises(ValueError, match="email"):
        repo.update_employee(1, {"email": "a@x"})

    assert data_file.read_bytes() == before
