from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import client_id, error_response, fail
from ..container import Container
from ..core.constants import NAVIGATION_DELAY_SECONDS
from ..core.enums import Role
from .model import AdminSession, AuthFailure, UserSession

_LANDING = {
    Role.ADMIN: "Dashboard",
    Role.INSTRUCTOR: "InstructorDashboard",
    Role.STUDENT: "StudentDashboard",
}


def _session_payload(user: UserSession) -> dict:
    if isinstance(user, AdminSession):
        return {"role": Role.ADMIN.value, "idNumber": user.admin_id, "fullName": "Administrator"}
    return {"role": user.role.value, "idNumber": user.id_number, "fullName": user.full_name}


def _remember(user: UserSession) -> None:
    payload = _session_payload(user)
    session["role"] = payload["role"]
    session["user_id"] = payload["idNumber"]
    session["name"] = payload["fullName"]


def register(app: Flask, container: Container) -> None:
    def own_mirror():
        return container.session_mirror.for_client(client_id())

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        try:
            outcome = container.auth_resolver.resolve(
                data.get("username", ""), data.get("password", ""), mirror=own_mirror()
            )
        except Exception as e:
            return error_response(e, action="log in")

        if isinstance(outcome, AuthFailure):
            return fail(outcome.reason, 401)

        # Durable mirror is already written by the resolver; the volatile flag comes last.
        _remember(outcome)
        return jsonify(
            {
                "ok": True,
                "message": f"{outcome.role.label} login successful!",
                "user": _session_payload(outcome),
                "next": _LANDING[outcome.role],
                "redirect_after": NAVIGATION_DELAY_SECONDS,
            }
        )

    @app.route("/session", methods=["GET"], endpoint="current_session")
    def current_session():
        if "role" in session:
            return jsonify(
                {
                    "ok": True,
                    "user": {"role": session["role"], "idNumber": session.get("user_id"), "fullName": session.get("name")},
                }
            )

        restored = own_mirror().restore()
        if restored is None:
            return jsonify({"ok": True, "user": None})

        _remember(restored)
        return jsonify({"ok": True, "user": _session_payload(restored)})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        cid = client_id()
        mirror = container.session_mirror.for_client(cid)
        role_s = session.get("role")
        if not role_s:
            restored = mirror.restore()
            role_s = restored.role.value if restored else None

        try:
            if role_s:
                container.logout_service.logout(Role(role_s), mirror=mirror)
        except Exception as e:
            return error_response(e, action="log out")
        finally:
            container.course_editors.discard(cid)
            session.clear()

        return jsonify({"ok": True, "message": "Logged out successfully"})
