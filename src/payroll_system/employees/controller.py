from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _form_fields() -> dict:
    return {
        "name": request.form.get("name", ""),
        "gender": request.form.get("gender", ""),
        "department": request.form.get("department", ""),
        "salary": request.form.get("salary", ""),
        "start_date": request.form.get("startDate", ""),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        report = container.payroll_report_service.build_report()
        return render_template("index.html", employees=report.rows, summary=report.summary)

    @app.route("/add", methods=["GET", "POST"], endpoint="add_employee")
    def add_employee():
        if request.method == "POST":
            try:
                employee = container.employee_service.create_employee(**_form_fields())
                flash(f"Added {employee.name}.", "success")
                return redirect(url_for("index"))
            except ValidationError as e:
                logger.info("Rejected new employee: %s", e)
                return render_template("add.html", error=str(e))

        return render_template("add.html", error=None)

    @app.route("/edit/<int:employee_id>", methods=["GET", "POST"], endpoint="edit_employee")
    def edit_employee(employee_id: int):
        if request.method == "POST":
            try:
                container.employee_service.update_employee(employee_id, **_form_fields())
                flash("Employee updated.", "success")
                return redirect(url_for("index"))
            except ValidationError as e:
                logger.info("Rejected update for employee %s: %s", employee_id, e)
                employee = container.employee_service.get_employee(employee_id)
                return render_template("edit.html", employee=employee, error=str(e))

        employee = container.employee_service.get_employee(employee_id)
        return render_template("edit.html", employee=employee, error=None)

    @app.route("/delete/<int:employee_id>", endpoint="delete_employee")
    def delete_employee(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        flash("Employee deleted.", "success")
        return redirect(url_for("index"))
