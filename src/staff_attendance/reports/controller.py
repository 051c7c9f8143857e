from __future__ import annotations

import io
import logging

from flask import Flask, flash, redirect, render_template, send_file, url_for

from ..common.web import current_session, flash_category
from ..container import Container
from ..core.constants import REPORT_COLUMNS, SUMMARY_EMPLOYEE_LABEL
from ..core.enums import ReportMode
from ..core.exceptions import DomainError
from .export import excel_filename, to_excel_bytes

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/print", methods=["GET"], endpoint="print_report")
    def print_report():
        try:
            report = current_session(container).report(ReportMode.DAILY)
        except DomainError as e:
            flash(str(e), flash_category(e))
            return redirect(url_for("attendance_page"))

        return render_template(
            "print.html",
            report=report,
            columns=REPORT_COLUMNS,
            summary_label=SUMMARY_EMPLOYEE_LABEL,
        )

    @app.route("/export/<mode>", methods=["GET"], endpoint="export_report")
    def export_report(mode: str):
        if mode not in {ReportMode.MONTHLY.value, ReportMode.YEARLY.value}:
            flash(f"Unsupported export: {mode}", "warning")
            return redirect(url_for("attendance_page"))

        try:
            report = current_session(container).report(ReportMode(mode))
        except DomainError as e:
            flash(str(e), flash_category(e))
            return redirect(url_for("attendance_page"))

        logger.info("exporting %s (%d rows)", excel_filename(report), len(report.rows))
        return send_file(
            io.BytesIO(to_excel_bytes(report)),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=excel_filename(report),
        )
