from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, client_id, error_response
from ..container import Container
from .editor import CourseEditor


def register(app: Flask, container: Container) -> None:
    service = container.course_service

    def _save(course_id=None):
        values = request.get_json(silent=True) or {}
        course = service.get_course(course_id) if course_id else None
        result = container.course_editors.for_client(client_id()).submit_posted(values, course=course)
        return {
            "ok": True,
            "message": result.message,
            "courseId": result.course_id,
            "courses": [c.to_dict() for c in result.courses],
        }

    @app.route("/admin/courses", methods=["GET"], endpoint="admin_courses")
    @admin_required
    def admin_courses():
        try:
            return jsonify({"ok": True, "courses": [c.to_dict() for c in service.list_courses()]})
        except Exception as e:
            return error_response(e, action="fetch courses")

    @app.route("/admin/courses", methods=["POST"], endpoint="create_course")
    @admin_required
    def create_course():
        try:
            return jsonify(_save()), 201
        except Exception as e:
            return error_response(e, action="save course")

    @app.route("/admin/courses/<course_id>", methods=["PUT"], endpoint="update_course")
    @admin_required
    def update_course(course_id: str):
        try:
            return jsonify(_save(course_id))
        except Exception as e:
            return error_response(e, action="save course")

    @app.route("/admin/courses/<course_id>/editor", methods=["GET"], endpoint="course_editor")
    @admin_required
    def course_editor(course_id: str):
        try:
            editor = CourseEditor(service)
            editor.open_existing(service.get_course(course_id))
            return jsonify({"ok": True, "courseId": course_id, "form": editor.form.to_dict()})
        except Exception as e:
            return error_response(e, action="load course")

    @app.route("/admin/courses/<course_id>", methods=["DELETE"], endpoint="delete_course")
    @admin_required
    def delete_course(course_id: str):
        try:
            service.delete(course_id)
            return jsonify({"ok": True, "message": "Course deleted successfully"})
        except Exception as e:
            return error_response(e, action="delete course")

    @app.route("/admin/instructors/search", methods=["GET"], endpoint="search_instructors")
    @admin_required
    def search_instructors():
        try:
            options = service.search_instructors(request.args.get("q", ""))
            return jsonify({"ok": True, "instructors": [o.to_dict() for o in options]})
        except Exception as e:
            return error_response(e, action="search instructors")

    @app.route("/admin/courses/backfill-instructor-ids", methods=["POST"], endpoint="backfill_instructor_ids")
    @admin_required
    def backfill_instructor_ids():
        try:
            updated, failed = service.backfill_instructor_ids()
            return jsonify(
                {
                    "ok": True,
                    "message": "Updated instructor IDs for existing courses",
                    "updated": updated,
                    "failed": failed,
                    "courses": [c.to_dict() for c in service.list_courses()],
                }
            )
        except Exception as e:
            return error_response(e, action="update instructor IDs")
