from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..common.serializers import attendance_entry_to_dict
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace

    def _log_text() -> str:
        # Either a multipart upload named "log" or the export pasted as the raw body.
        if request.mimetype == "multipart/form-data":
            upload = request.files.get("log")
            if upload is None:
                raise ValidationError("Attach the terminal export as the 'log' file field")
            return upload.read().decode("utf-8", errors="replace")
        return request.get_data(as_text=True) or ""

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        return ok([attendance_entry_to_dict(a) for a in workspace.attendance])

    @app.route("/api/attendance/import", methods=["POST"], endpoint="attendance_import")
    def attendance_import():
        entries = workspace.import_attendance(_log_text())
        return ok([attendance_entry_to_dict(a) for a in entries], status=201, imported=len(entries))
