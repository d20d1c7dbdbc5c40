from __future__ import annotations

import enum
import logging
from typing import Any

from ..config import Config
from . import registry
from .models import Room, Stroke, other_team


logger = logging.getLogger(__name__)

# Refill the pool when fewer words than this remain.
MIN_POOL_SIZE = 2


class GuessOutcome(enum.Enum):
    IGNORED = "ignored"
    CORRECT = "correct"
    INCORRECT = "incorrect"


def start_game(room: Room, batch_size: int | None = None) -> bool:
    with room.lock:
        if room.state != "lobby":
            return False

        # A failing word refill raises here and leaves the room in the lobby.
        start_round(room, batch_size=batch_size)
        room.started = True
        room.state = "in_round"
        room.seconds_remaining = room.round_time_minutes * 60
        room.timer_running = True

    logger.info(
        "[game-start] code=%s players=%d seconds=%s", room.code, len(room.players), room.seconds_remaining
    )
    return True


def _next_word(room: Room, batch_size: int | None) -> str:
    if len(room.word_pool) < MIN_POOL_SIZE:
        room.word_pool = registry.fetch_words(room.topic, batch_size)
        logger.info("[words-refill] code=%s topic=%s words=%d", room.code, room.topic, len(room.word_pool))
    return room.word_pool.pop()


def start_round(room: Room, batch_size: int | None = None) -> None:
    with room.lock:
        room.current_word = _next_word(room, batch_size)
        room.drawing_strokes = []
        room.guessed = False
        room.round += 1
        room.refresh_drawers()

    logger.info("[round-start] code=%s round=%d drawers=%s", room.code, room.round, room.drawers)


def tick(room: Room) -> int:
    """Advance the countdown by one second and return what is left.

    Reaching zero stops the timer and ends the game.
    """
    with room.lock:
        if not room.timer_running or room.seconds_remaining is None:
            return 0

        room.seconds_remaining -= 1
        if room.seconds_remaining <= 0:
            room.seconds_remaining = 0
            room.timer_running = False
            room.state = "game_over"
            logger.info("[game-end] code=%s rounds=%d scores=%s", room.code, room.round, room.scores)
        return room.seconds_remaining


def guess(
    room: Room,
    name: str,
    text: str,
    points: int | None = None,
    batch_size: int | None = None,
) -> GuessOutcome:
    with room.lock:
        if room.state != "in_round" or not room.current_word or room.guessed:
            return GuessOutcome.IGNORED
        if room.find_player(name) is None:
            return GuessOutcome.IGNORED

        if (text or "").strip().lower() != room.current_word.lower():
            return GuessOutcome.INCORRECT

        room.scores[name] = room.scores.get(name, 0) + (points or Config.GUESS_POINTS)
        room.guessed = True
        logger.info("[guess-correct] code=%s name=%s word=%s", room.code, name, room.current_word)
        start_round(room, batch_size=batch_size)
        return GuessOutcome.CORRECT


def switch_team(room: Room, name: str) -> bool:
    with room.lock:
        player = room.find_player(name)
        if player is None:
            return False

        room.teams[player.team] = [p for p in room.teams[player.team] if p.name != name]
        player.team = other_team(player.team)
        room.teams[player.team].append(player)
        room.refresh_drawers()
        return True


def set_time(room: Room, minutes: Any) -> bool:
    # bool is an int subclass.
    if isinstance(minutes, bool):
        return False
    try:
        value = int(minutes)
    except (TypeError, ValueError):
        return False

    with room.lock:
        room.round_time_minutes = value
        return True


def add_stroke(room: Room, points: Any) -> Stroke | None:
    if not isinstance(points, list) or not points:
        return None

    stroke: Stroke = []
    for point in points:
        if not isinstance(point, dict):
            return None
        try:
            stroke.append({"x": float(point["x"]), "y": float(point["y"])})
        except (KeyError, TypeError, ValueError):
            return None

    with room.lock:
        room.drawing_strokes.append(stroke)
    return stroke
