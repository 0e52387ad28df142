from __future__ import annotations

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    ConflictError,
    DomainError,
    InconsistentWriteError,
    NotFoundError,
    PayrollConflictError,
    PersistenceError,
    ValidationError,
)


def ok(data=None, status=200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status


def fail(message="Bad Request", status=400, code=None, detail=None):
    err = {"message": message}
    if code:
        err["code"] = code
    if detail:
        err["detail"] = detail
    return jsonify({"success": False, "error": err}), status


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), status=400, code="VALIDATION_ERROR")

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), status=404, code="NOT_FOUND")

    @app.errorhandler(PayrollConflictError)
    def _payroll_conflict(e: PayrollConflictError):
        return fail(str(e), status=409, code="PAYROLL_ALREADY_PROCESSED")

    @app.errorhandler(ConflictError)
    def _conflict(e: ConflictError):
        return fail("Duplicate or reference constraint failed", status=409, code="CONSTRAINT_ERROR")

    @app.errorhandler(InconsistentWriteError)
    def _inconsistent(e: InconsistentWriteError):
        app.logger.error("Inconsistent write: %s", e)
        return fail(str(e), status=500, code="INCONSISTENT_WRITE")

    @app.errorhandler(PersistenceError)
    def _persistence(e: PersistenceError):
        app.logger.error("Data store failure: %s", e)
        return fail("Could not reach the database", status=503, code="DATABASE_UNAVAILABLE")

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return fail(str(e), status=400)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
