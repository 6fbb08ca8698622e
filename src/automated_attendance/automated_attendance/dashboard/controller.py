from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.web import admin_required, error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        try:
            stats = container.dashboard_service.statistics()
        except Exception as e:
            return error_response(e, action="fetch statistics")

        trend = container.dashboard_service.trend()
        return jsonify({"ok": True, "statistics": asdict(stats), "trend": asdict(trend)})
