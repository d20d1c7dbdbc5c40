from __future__ import annotations

import logging
from typing import Any

from flask import current_app, request
from flask_socketio import SocketIO, emit, join_room, leave_room

from ..game import registry, rounds
from ..game.rounds import GuessOutcome
from . import events


logger = logging.getLogger(__name__)


def register_socketio_handlers(socketio: SocketIO) -> None:
    # socket id -> {"code": ..., "name": ...}, bound on join-room
    sid_ctx: dict[str, dict[str, str]] = {}
    room_tasks: dict[str, bool] = {}

    def _broadcast_room_state(room_code: str) -> None:
        room = registry.get_room(room_code)
        if not room:
            return
        socketio.emit(events.STATE_UPDATE, registry.room_snapshot(room), to=room_code)

    def _bound_room():
        ctx = sid_ctx.get(request.sid)
        if not ctx:
            return None, None
        room = registry.get_room(ctx["code"])
        if not room:
            return None, None
        return room, ctx["name"]

    def _ensure_countdown(room_code: str, interval: float) -> None:
        if room_tasks.get(room_code):
            return
        room_tasks[room_code] = True

        def _runner() -> None:
            try:
                while True:
                    socketio.sleep(interval)
                    room = registry.get_room(room_code)
                    if not room:
                        break

                    remaining = rounds.tick(room)
                    socketio.emit(events.TICK, remaining, to=room_code)
                    if remaining <= 0:
                        _broadcast_room_state(room_code)
                        socketio.emit(events.GAME_ENDED, to=room_code)
                        break
            finally:
                room_tasks.pop(room_code, None)

        socketio.start_background_task(_runner)

    @socketio.on(events.JOIN_ROOM)
    def on_join_room(data):
        payload = data or {}
        room_code = str(payload.get("code", "")).strip()
        name = str(payload.get("name", "")).strip()
        if not room_code or not name:
            return

        room = registry.get_room(room_code)
        if not room:
            return

        previous = sid_ctx.get(request.sid)
        if previous and previous["code"] != room_code:
            leave_room(previous["code"])
            old_room = registry.get_room(previous["code"])
            if old_room and registry.remove_player(old_room, previous["name"]):
                _broadcast_room_state(old_room.code)

        join_room(room_code)
        sid_ctx[request.sid] = {"code": room_code, "name": name}
        logger.info("[socket-join] code=%s name=%s sid=%s", room_code, name, request.sid)

        # Late joiners get the strokes of the current round.
        with room.lock:
            strokes = list(room.drawing_strokes)
        for stroke in strokes:
            emit(events.STROKE, stroke, to=request.sid)

        _broadcast_room_state(room_code)

    @socketio.on(events.SWITCH_TEAM)
    def on_switch_team(data=None):
        room, name = _bound_room()
        if not room:
            return
        if rounds.switch_team(room, name):
            _broadcast_room_state(room.code)

    @socketio.on(events.SET_TIME)
    def on_set_time(minutes: Any = None):
        room, _ = _bound_room()
        if not room:
            return
        if rounds.set_time(room, minutes):
            _broadcast_room_state(room.code)

    @socketio.on(events.START_GAME)
    def on_start_game(data=None):
        room, _ = _bound_room()
        if not room:
            return

        config = current_app.config
        if not rounds.start_game(room, batch_size=config.get("WORD_BATCH_SIZE")):
            return

        _broadcast_room_state(room.code)
        socketio.emit(events.ROUND_STARTED, to=room.code)
        _ensure_countdown(room.code, float(config.get("TICK_INTERVAL_SEC", 1.0)))

    @socketio.on(events.DRAW)
    def on_draw(data):
        payload = data or {}
        room_code = str(payload.get("code", "")).strip()
        room = registry.get_room(room_code)
        if not room:
            return

        stroke = rounds.add_stroke(room, payload.get("stroke"))
        if stroke is None:
            return
        emit(events.STROKE, stroke, to=room_code)

    @socketio.on(events.GUESS)
    def on_guess(data):
        payload = data or {}
        room_code = str(payload.get("code", "")).strip()
        name = str(payload.get("name", "")).strip()
        text = str(payload.get("text", ""))

        room = registry.get_room(room_code)
        if not room:
            return

        config = current_app.config
        outcome = rounds.guess(
            room,
            name,
            text,
            points=config.get("GUESS_POINTS"),
            batch_size=config.get("WORD_BATCH_SIZE"),
        )
        if outcome is GuessOutcome.IGNORED:
            return
        if outcome is GuessOutcome.INCORRECT:
            emit(events.GUESS_RESULT, events.INCORRECT_MESSAGE, to=request.sid)
            return

        emit(events.GUESS_RESULT, events.CORRECT_MESSAGE, to=room_code)
        _broadcast_room_state(room_code)
        socketio.emit(events.ROUND_STARTED, to=room_code)
        # Empty stroke clears every canvas in the room.
        socketio.emit(events.STROKE, [], to=room_code)

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        ctx = sid_ctx.pop(request.sid, None)
        if not ctx:
            return

        room = registry.get_room(ctx["code"])
        if not room:
            return

        registry.remove_player(room, ctx["name"])
        logger.info("[socket-leave] code=%s name=%s sid=%s", room.code, ctx["name"], request.sid)
        _broadcast_room_state(room.code)
