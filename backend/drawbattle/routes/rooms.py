from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..errors import RoomNotFound
from ..game import registry

bp = Blueprint("rooms", __name__)


@bp.post("/create-game")
def create_game():
    data = request.get_json(silent=True) or {}
    topic = data.get("topic")
    if not isinstance(topic, str):
        topic = None

    room = registry.create_room(
        topic=topic or current_app.config.get("DEFAULT_TOPIC"),
        batch_size=current_app.config.get("WORD_BATCH_SIZE"),
        round_minutes=current_app.config.get("DEFAULT_ROUND_MINUTES"),
    )
    return jsonify({"code": room.code})


@bp.post("/join-game")
def join_game():
    data = request.get_json(silent=True) or {}
    # RoomNotFound / NameTaken / InvalidPayload are rendered by the app error handler.
    registry.join_room(str(data.get("code") or ""), str(data.get("name") or ""))
    return jsonify({"success": True})


@bp.get("/rooms/<code>")
def get_room(code: str):
    room = registry.get_room(code)
    if not room:
        raise RoomNotFound()
    return jsonify(registry.room_snapshot(room))
