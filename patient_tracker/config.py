# -*- coding: utf-8 -*-
from __future__ import annotations

import os
from typing import List

_DEFAULT_PORT = 3000


def _env(*names: str) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


class Settings:
    """Centralized configuration for the patient tracker service."""

    def __init__(self) -> None:
        self.app_title: str = os.environ.get("PATIENT_TRACKER_TITLE", "Patient Treatment API")
        self.host: str = _env("PATIENT_TRACKER_HOST", "HOST") or "127.0.0.1"
        port_raw = _env("PATIENT_TRACKER_PORT", "PORT") or str(_DEFAULT_PORT)
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = _DEFAULT_PORT
        self.docs_url: str = os.environ.get("PATIENT_TRACKER_DOCS_URL") or "/api-docs"
        self.log_level: str = (os.environ.get("PATIENT_TRACKER_LOG_LEVEL") or "INFO").upper()
        self.log_json: bool = (os.environ.get("PATIENT_TRACKER_LOG_JSON") or "").strip() in {"1", "true", "True"}

        cors = os.environ.get("PATIENT_TRACKER_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
