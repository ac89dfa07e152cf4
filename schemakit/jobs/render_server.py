"""HTTP entrypoint that renders JSON-LD script tags on demand."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, Response, jsonify, request

from schemakit.core.config import configure_logging, get_settings
from schemakit.errors import RecordError
from schemakit.kinds import SCHEMA_KINDS, render_payload

logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)

# ---------- Routes ----------


@app.get("/healthz")
def healthcheck() -> Any:
    return jsonify({"status": "ok", "kinds": sorted(SCHEMA_KINDS)}), 200


@app.post("/render/<kind>")
def render_schema(kind: str) -> Any:
    """
    Render a JSON-LD script tag for ``kind``.
    Body: JSON object (a list for breadcrumbs and faq).
    Query: format=html returns the bare script tag instead of a JSON envelope.
    """
    if kind not in SCHEMA_KINDS:
        return jsonify({"error": f"unknown schema kind: {kind}"}), 404

    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "request body must be JSON"}), 400

    settings = get_settings()
    try:
        script = render_payload(kind, payload, default_country=settings.default_country)
    except RecordError as exc:
        logger.info("Rejected %s payload: %s", kind, exc)
        return jsonify({"error": str(exc), "missing": exc.missing}), 400

    if request.args.get("format") == "html":
        return Response(script, status=200, mimetype="text/html")
    return jsonify({"data": {"kind": kind, "script": script}}), 200


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("[BOOT] Binding on 0.0.0.0:%d", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
