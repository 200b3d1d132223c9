from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_LATE_CUTOFF
from .reports.controller import register as register_reports
from .sources.repository import SourceRepository


def create_app(*, sources: Optional[SourceRepository] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    source_config = getattr(settings, "SOURCE_CONFIG")
    late_cutoff = getattr(settings, "LATE_CUTOFF", DEFAULT_LATE_CUTOFF)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)
    logger.info(
        "settings=%s backend=%s cutoff=%s",
        settings_module,
        source_config.get("backend"),
        late_cutoff,
    )

    container = build_container(source_config=source_config, late_cutoff=late_cutoff, sources=sources)
    register_reports(app, container)

    return app
