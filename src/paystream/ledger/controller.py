from __future__ import annotations

from flask import Flask

from ..common.fields import get_field, get_text
from ..common.http import json_body, ok
from ..common.serializers import employee_to_dict, ledger_transaction_to_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace

    def _grant(issue):
        body = json_body()
        result = issue(get_text(body, "employeeId"), get_field(body, "amount"), get_text(body, "reason"))
        if result is None:
            # Nothing selected; nothing written.
            return ok(None)
        return ok(
            {
                "transaction": ledger_transaction_to_dict(result.transaction),
                "employee": employee_to_dict(result.employee),
            },
            status=201,
        )

    @app.route("/api/advances", methods=["GET"], endpoint="advances_list")
    def advances_list():
        return ok([ledger_transaction_to_dict(t) for t in workspace.advance_history])

    @app.route("/api/advances", methods=["POST"], endpoint="advances_issue")
    def advances_issue():
        return _grant(workspace.issue_advance)

    @app.route("/api/bonuses", methods=["GET"], endpoint="bonuses_list")
    def bonuses_list():
        return ok([ledger_transaction_to_dict(t) for t in workspace.bonus_history])

    @app.route("/api/bonuses", methods=["POST"], endpoint="bonuses_issue")
    def bonuses_issue():
        return _grant(workspace.issue_bonus)
