from __future__ import annotations

from flask import Flask

from ..common.fields import get_text
from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace

    def _vocabulary():
        return {"departments": list(workspace.departments), "positions": list(workspace.positions)}

    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    def settings_get():
        return ok(_vocabulary())

    @app.route("/api/settings/departments", methods=["POST"], endpoint="settings_add_department")
    def settings_add_department():
        workspace.add_department(get_text(json_body(), "name"))
        return ok(_vocabulary())

    @app.route("/api/settings/departments", methods=["DELETE"], endpoint="settings_remove_department")
    def settings_remove_department():
        workspace.remove_department(get_text(json_body(), "name"))
        return ok(_vocabulary())

    @app.route("/api/settings/positions", methods=["POST"], endpoint="settings_add_position")
    def settings_add_position():
        workspace.add_position(get_text(json_body(), "name"))
        return ok(_vocabulary())

    @app.route("/api/settings/positions", methods=["DELETE"], endpoint="settings_remove_position")
    def settings_remove_position():
        workspace.remove_position(get_text(json_body(), "name"))
        return ok(_vocabulary())
