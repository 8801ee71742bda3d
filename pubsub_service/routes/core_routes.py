# pubsub_service/routes/core_routes.py

"""Root and health endpoints."""

from flask import Blueprint, Response

from pubsub_service.core.interfaces import IHealthChecker

ROOT_MESSAGE = "Hello, Cloud Run!"


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_core_blueprint(health_checker: IHealthChecker) -> Blueprint:
    """Build the blueprint with its health checker bound explicitly."""
    core_bp = Blueprint("core", __name__)

    @core_bp.route("/", methods=["GET"])
    def root():
        return _text(ROOT_MESSAGE)

    @core_bp.route("/health", methods=["GET"])
    def health():
        report = health_checker.check()
        return _text(report.message, report.status_code)

    return core_bp
