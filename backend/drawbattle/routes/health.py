from __future__ import annotations

from flask import Blueprint, jsonify

from ..game import registry

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    return jsonify({"status": "ok", "rooms": len(registry.list_rooms())})
