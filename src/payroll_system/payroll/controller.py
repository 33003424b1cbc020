from __future__ import annotations

import io

from flask import Flask, send_file

from ..container import Container
from ..core.constants import XLSX_MIMETYPE


def register(app: Flask, container: Container) -> None:
    @app.route("/export", endpoint="export_payroll")
    def export_payroll():
        report = container.payroll_report_service.build_report()
        data = container.payroll_exporter.export(report)
        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=container.payroll_exporter.filename(report.generated_at),
        )
