from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .accounts.controller import register as register_accounts
from .auth.controller import register as register_auth
from .container import Container, build_container
from .courses.controller import register as register_courses
from .dashboard.controller import register as register_dashboard

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    api_config = getattr(settings, "API_CONFIG")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s api=%s", settings_module, api_config.get("base_url"))

    container = container or build_container(api_config=api_config)

    register_auth(app, container)
    register_accounts(app, container)
    register_courses(app, container)
    register_dashboard(app, container)

    return app
