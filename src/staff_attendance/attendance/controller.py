from __future__ import annotations

import logging

from flask import Flask, current_app, flash, jsonify, redirect, render_template, request, url_for

from ..common.web import current_session, flash_category, json_error
from ..container import Container
from ..core.constants import DEFAULT_MESSAGE_TIMEOUT_MS
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, PersistenceError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    # ===== RECORD STORE API =====

    @app.route("/api/attendance", methods=["GET"], endpoint="api_list_attendance")
    def api_list_attendance():
        try:
            return jsonify([e.to_dict() for e in container.attendance_service.list_attendance()])
        except DomainError as e:
            return json_error(e)

    @app.route("/api/attendance/save", methods=["POST"], endpoint="api_save_attendance")
    def api_save_attendance():
        data = request.get_json(silent=True) or {}
        try:
            entry = container.attendance_service.save_attendance(data)
            return jsonify({"success": True, **entry.to_dict()})
        except DomainError as e:
            return json_error(e)

    # ===== ATTENDANCE PAGE =====

    @app.route("/", methods=["GET"], endpoint="attendance_page")
    def attendance_page():
        try:
            store = current_session(container)
        except PersistenceError:
            flash("Failed to fetch data from server", "danger")
            return render_template(
                "attendance.html",
                employees=[],
                entries={},
                selected_date=None,
                summary=None,
                **_page_context(),
            )

        selected = store.selected_date
        return render_template(
            "attendance.html",
            employees=store.employees,
            entries=store.day_entries(),
            selected_date=selected,
            summary=store.summary() if selected else None,
            **_page_context(),
        )

    def _page_context() -> dict:
        return {
            "today": container.today().isoformat(),
            "status_options": AttendanceStatus.recognised(),
            "message_timeout": int(current_app.config.get("MESSAGE_TIMEOUT_MS", DEFAULT_MESSAGE_TIMEOUT_MS)),
        }

    @app.route("/date", methods=["POST"], endpoint="select_date")
    def select_date():
        try:
            current_session(container).select_date(request.form.get("date", ""))
        except DomainError as e:
            flash(str(e), flash_category(e))
        return redirect(url_for("attendance_page"))

    @app.route("/attendance/status", methods=["POST"], endpoint="set_status")
    def set_status():
        name = request.form.get("employee", "")
        try:
            current_session(container).set_status(name, request.form.get("status", ""))
            flash(f"{name}'s attendance updated.", "success")
        except DomainError as e:
            flash(str(e), flash_category(e))
        except Exception:
            logger.exception("unexpected error saving attendance for %s", name)
            flash("Error saving attendance", "danger")
        return redirect(url_for("attendance_page"))

    @app.route("/attendance/reason", methods=["POST"], endpoint="set_reason")
    def set_reason():
        name = request.form.get("employee", "")
        try:
            current_session(container).set_reason(name, request.form.get("reason", ""))
            flash("Reason updated successfully.", "success")
        except DomainError as e:
            flash(str(e), flash_category(e))
        except Exception:
            logger.exception("unexpected error updating reason for %s", name)
            flash("Error updating reason", "danger")
        return redirect(url_for("attendance_page"))

    @app.route("/reload", methods=["POST"], endpoint="reload_data")
    def reload_data():
        try:
            current_session(container).reload()
            flash("Data reloaded from server.", "info")
        except DomainError as e:
            flash(str(e), flash_category(e))
        return redirect(url_for("attendance_page"))
