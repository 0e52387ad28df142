from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import current_period
from ..common.fields import get_field, get_text
from ..common.http import json_body, ok
from ..common.serializers import payroll_record_to_dict, preview_to_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    workspace = container.workspace

    @app.route("/api/payroll/preview", methods=["GET"], endpoint="payroll_preview")
    def payroll_preview():
        month, year = current_period()
        preview = workspace.preview_payroll(
            request.args.get("month") or month,
            request.args.get("year") or year,
            request.args.get("q", ""),
        )
        return ok(preview_to_dict(preview))

    @app.route("/api/payroll/commit", methods=["POST"], endpoint="payroll_commit")
    def payroll_commit():
        body = json_body()
        month, year = current_period()
        # Drafts are recomputed here; figures sent by the client are never trusted.
        preview = workspace.preview_payroll(
            get_text(body, "month") or month,
            get_field(body, "year") or year,
            get_text(body, "q"),
        )
        records = workspace.commit_payroll(preview.drafts)
        return ok(
            [payroll_record_to_dict(r) for r in records],
            status=201 if records else 200,
            committed=len(records),
            totalNet=sum((r.net_pay for r in records), 0.0),
        )

    @app.route("/api/payroll/history", methods=["GET"], endpoint="payroll_history")
    def payroll_history():
        return ok([payroll_record_to_dict(r) for r in workspace.payroll_history])
