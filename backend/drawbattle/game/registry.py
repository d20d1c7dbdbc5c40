from __future__ import annotations

import logging
import random
import string
from dataclasses import asdict
from threading import RLock

from ..config import Config
from ..errors import InvalidPayload, NameTaken, RoomNotFound
from .models import Player, Room
from .words import WordSource


logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 6

_lock = RLock()
_rooms: dict[str, Room] = {}
_word_source: WordSource | None = None


def set_word_source(source: WordSource | None) -> None:
    global _word_source
    _word_source = source


def fetch_words(topic: str, count: int | None = None) -> list[str]:
    if _word_source is None:
        raise RuntimeError("word source is not configured")
    return _word_source.fetch_words(topic, count or Config.WORD_BATCH_SIZE)


def _new_code() -> str:
    return "".join(random.choices(CODE_ALPHABET, k=CODE_LENGTH))


def create_room(
    topic: str | None = None,
    batch_size: int | None = None,
    round_minutes: int | None = None,
) -> Room:
    topic = (topic or "").strip() or Config.DEFAULT_TOPIC
    # Fetched before reserving the code so a failing provider leaves no room behind.
    words = fetch_words(topic, batch_size)

    with _lock:
        code = _new_code()
        while code in _rooms:
            code = _new_code()

        room = Room(
            code=code,
            topic=topic,
            round_time_minutes=round_minutes or Config.DEFAULT_ROUND_MINUTES,
            word_pool=words,
        )
        _rooms[code] = room

    logger.info("[room-create] code=%s topic=%s words=%d", code, topic, len(words))
    return room


def get_room(code: str) -> Room | None:
    with _lock:
        return _rooms.get(code)


def list_rooms() -> list[Room]:
    with _lock:
        return list(_rooms.values())


def clear_rooms() -> None:
    with _lock:
        _rooms.clear()


def join_room(code: str, name: str) -> Player:
    code = (code or "").strip()
    name = (name or "").strip()
    if not code or not name:
        raise InvalidPayload()

    room = get_room(code)
    if room is None:
        raise RoomNotFound()

    with room.lock:
        if room.find_player(name) is not None:
            raise NameTaken()

        player = Player(name=name, team="A")
        room.players.append(player)
        room.teams["A"].append(player)
        room.scores[name] = 0
        room.refresh_drawers()

    logger.info("[room-join] code=%s name=%s players=%d", code, name, len(room.players))
    return player


def remove_player(room: Room, name: str) -> bool:
    with room.lock:
        player = room.find_player(name)
        if player is None:
            return False

        room.players = [p for p in room.players if p.name != name]
        room.teams["A"] = [p for p in room.teams["A"] if p.name != name]
        room.teams["B"] = [p for p in room.teams["B"] if p.name != name]
        room.scores.pop(name, None)
        room.refresh_drawers()

    logger.info("[room-leave] code=%s name=%s players=%d", room.code, name, len(room.players))
    return True


def room_snapshot(room: Room) -> dict:
    with room.lock:
        return {
            "code": room.code,
            "topic": room.topic,
            "state": room.state,
            "started": room.started,
            "round": room.round,
            "roundTimeMinutes": room.round_time_minutes,
            "currentWord": room.current_word,
            "players": [asdict(p) for p in room.players],
            "teams": {team: [asdict(p) for p in members] for team, members in room.teams.items()},
            "drawers": dict(room.drawers),
            "scores": dict(room.scores),
            "secondsRemaining": room.seconds_remaining,
        }
