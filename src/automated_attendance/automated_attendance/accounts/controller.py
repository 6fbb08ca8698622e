from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, error_response, parse_role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/accounts", methods=["GET"], endpoint="admin_accounts")
    @admin_required
    def admin_accounts():
        try:
            return jsonify({"ok": True, "accounts": container.account_service.list_accounts(request.args.get("q"))})
        except Exception as e:
            return error_response(e, action="fetch accounts")

    @app.route("/admin/accounts", methods=["POST"], endpoint="create_account")
    @admin_required
    def create_account():
        data = request.get_json(silent=True) or {}
        try:
            container.account_service.create_account(
                role=parse_role(data.get("accountType")),
                id_number=data.get("idNumber", ""),
                full_name=data.get("fullName", ""),
                password=data.get("password", ""),
            )
            return jsonify({"ok": True, "message": "Account created successfully"}), 201
        except Exception as e:
            return error_response(e, action="create account")

    @app.route("/admin/accounts/<role>/<account_id>", methods=["PUT"], endpoint="update_account")
    @admin_required
    def update_account(role: str, account_id: str):
        data = request.get_json(silent=True) or {}
        try:
            container.account_service.update_account(
                role=parse_role(role),
                account_id=account_id,
                id_number=data.get("idNumber", ""),
                full_name=data.get("fullName") or data.get("name", ""),
            )
            return jsonify({"ok": True, "message": "Account updated successfully"})
        except Exception as e:
            return error_response(e, action="update account")

    @app.route("/admin/accounts/<role>/<account_id>", methods=["DELETE"], endpoint="delete_account")
    @admin_required
    def delete_account(role: str, account_id: str):
        try:
            parsed = parse_role(role)
            container.account_service.delete_account(role=parsed, account_id=account_id)
            return jsonify({"ok": True, "message": f"{parsed.label} deleted successfully"})
        except Exception as e:
            return error_response(e, action="delete account")
