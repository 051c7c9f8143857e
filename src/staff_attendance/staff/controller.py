from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, request, url_for

from ..common.web import current_session, flash_category, json_error
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    # ===== RECORD STORE API =====

    @app.route("/api/attendance/staffs", methods=["GET"], endpoint="api_list_staff")
    def api_list_staff():
        try:
            return jsonify([e.to_dict() for e in container.staff_service.list_staff()])
        except DomainError as e:
            return json_error(e)

    @app.route("/api/attendance/staffs", methods=["POST"], endpoint="api_add_staff")
    def api_add_staff():
        data = request.get_json(silent=True) or {}
        try:
            employee = container.staff_service.add_staff(str(data.get("name") or ""))
            return jsonify({"success": True, "name": employee.name}), 201
        except DomainError as e:
            return json_error(e)

    @app.route("/api/attendance/staffs/<path:old_name>", methods=["PUT"], endpoint="api_rename_staff")
    def api_rename_staff(old_name: str):
        data = request.get_json(silent=True) or {}
        try:
            employee = container.staff_service.rename_staff(old_name, str(data.get("newName") or ""))
            return jsonify({"success": True, "name": employee.name})
        except DomainError as e:
            return json_error(e)

    @app.route("/api/attendance/staffs/<path:name>", methods=["DELETE"], endpoint="api_remove_staff")
    def api_remove_staff(name: str):
        try:
            container.staff_service.remove_staff(name)
            return jsonify({"success": True})
        except DomainError as e:
            return json_error(e)

    # ===== ROSTER ACTIONS (HTML) =====

    @app.route("/staff/add", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            name = current_session(container).add_employee(request.form.get("name", ""))
            flash("Employee added successfully!", "success")
            logger.info("employee added: %s", name)
        except DomainError as e:
            flash(str(e), flash_category(e))
        except Exception:
            logger.exception("unexpected error adding employee")
            flash("Error adding employee", "danger")
        return redirect(url_for("attendance_page"))

    @app.route("/staff/rename", methods=["POST"], endpoint="rename_employee")
    def rename_employee():
        old_name = request.form.get("old_name", "")
        new_name = request.form.get("new_name", "")
        try:
            if current_session(container).rename_employee(old_name, new_name):
                flash("Employee name updated!", "success")
        except DomainError as e:
            flash(str(e), flash_category(e))
        except Exception:
            logger.exception("unexpected error renaming employee %s", old_name)
            flash("Error updating employee", "danger")
        return redirect(url_for("attendance_page"))

    @app.route("/staff/delete", methods=["POST"], endpoint="delete_employee")
    def delete_employee():
        name = request.form.get("name", "")
        try:
            current_session(container).remove_employee(name)
            flash(f"{name} removed successfully.", "success")
        except DomainError as e:
            flash(str(e), flash_category(e))
        except Exception:
            logger.exception("unexpected error deleting employee %s", name)
            flash("Error deleting employee", "danger")
        return redirect(url_for("attendance_page"))
