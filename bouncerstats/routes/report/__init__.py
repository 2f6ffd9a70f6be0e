"""Report blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("report", __name__)


def get_datastore():
    from flask import current_app

    return current_app.extensions["datastore"]


def get_renderer():
    from flask import current_app

    return current_app.extensions["renderer"]


from . import chart, health  # noqa: E402,F401

__all__ = ["bp", "get_datastore", "get_renderer"]
