from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .accounts.api_account_repository import ApiAccountRepository
from .accounts.service import AccountService
from .api.client import ApiClient
from .auth.service import AuthResolver
from .core.constants import DEFAULT_LOGIN_TIMEOUT_SECONDS
from .courses.api_course_repository import ApiCourseRepository
from .courses.editor import CourseEditors
from .courses.service import CourseService
from .dashboard.service import DashboardService
from .session.mirror import SessionMirror
from .session.service import LogoutService
from .session.store import JsonFileKeyValueStore, KeyValueStore


@dataclass(frozen=True)
class Container:
    api: ApiClient
    admin_id: str

    accounts_repo: ApiAccountRepository
    courses_repo: ApiCourseRepository
    session_mirror: SessionMirror

    auth_resolver: AuthResolver
    logout_service: LogoutService
    account_service: AccountService
    course_service: CourseService
    course_editors: CourseEditors
    dashboard_service: DashboardService


def build_container(
    *,
    api_config: dict,
    store: Optional[KeyValueStore] = None,
    http_session: Optional[requests.Session] = None,
) -> Container:
    admin_id = str(api_config["admin_id"])
    admin_password = str(api_config["admin_password"])

    api = ApiClient(
        str(api_config["base_url"]),
        admin_id=admin_id,
        admin_password=admin_password,
        session=http_session,
    )
    store = store or JsonFileKeyValueStore(api_config.get("session_store_path", ".session/store.json"))

    accounts_repo = ApiAccountRepository(api)
    courses_repo = ApiCourseRepository(api)
    session_mirror = SessionMirror(store)

    auth_resolver = AuthResolver(
        accounts_repo,
        session_mirror,
        admin_id=admin_id,
        admin_password=admin_password,
        timeout=float(api_config.get("login_timeout", DEFAULT_LOGIN_TIMEOUT_SECONDS)),
    )

    course_service = CourseService(courses_repo, accounts_repo)

    return Container(
        api=api,
        admin_id=admin_id,
        accounts_repo=accounts_repo,
        courses_repo=courses_repo,
        session_mirror=session_mirror,
        auth_resolver=auth_resolver,
        logout_service=LogoutService(accounts_repo, session_mirror),
        account_service=AccountService(accounts_repo),
        course_service=course_service,
        course_editors=CourseEditors(course_service),
        dashboard_service=DashboardService(accounts_repo, courses_repo),
    )
