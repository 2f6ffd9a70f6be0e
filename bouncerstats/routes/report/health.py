"""Healthcheck endpoint."""

from __future__ import annotations

from flask import current_app, jsonify

from . import bp, get_datastore


@bp.route("/health", methods=["GET"])
def health():
    datastore = get_datastore()
    try:
        first_date, last_date = datastore.date_bounds()
        return (
            jsonify(
                {
                    "ok": True,
                    "first_date": first_date.isoformat() if first_date else "",
                    "last_date": last_date.isoformat() if last_date else "",
                }
            ),
            200,
        )
    except Exception as exc:
        current_app.logger.exception("Healthcheck failed")
        return jsonify({"ok": False, "error": str(exc)}), 500
