from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Literal


TeamName = Literal["A", "B"]
RoomState = Literal["lobby", "in_round", "game_over"]

TEAM_NAMES: tuple[TeamName, TeamName] = ("A", "B")

Point = dict[str, float]
Stroke = list[Point]


def other_team(team: TeamName) -> TeamName:
    return "B" if team == "A" else "A"


@dataclass
class Player:
    name: str
    team: TeamName = "A"


@dataclass
class Room:
    code: str
    topic: str = "anything"
    state: RoomState = "lobby"
    started: bool = False
    round: int = 0
    round_time_minutes: int = 5
    current_word: str = ""
    word_pool: list[str] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    teams: dict[str, list[Player]] = field(default_factory=lambda: {"A": [], "B": []})
    # First player of each team; recomputed on every team-affecting mutation.
    drawers: dict[str, str | None] = field(default_factory=lambda: {"A": None, "B": None})
    scores: dict[str, int] = field(default_factory=dict)
    drawing_strokes: list[Stroke] = field(default_factory=list)
    guessed: bool = False
    seconds_remaining: int | None = None
    timer_running: bool = False
    lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    def find_player(self, name: str) -> Player | None:
        for p in self.players:
            if p.name == name:
                return p
        return None

    def refresh_drawers(self) -> None:
        for team in TEAM_NAMES:
            members = self.teams[team]
            self.drawers[team] = members[0].name if members else None
