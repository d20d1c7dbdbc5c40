from __future__ import annotations


class GameError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_payload(self) -> dict:
        return {"error": self.message}


class RoomNotFound(GameError):
    status_code = 404
    message = "Game not found"


class NameTaken(GameError):
    message = "Name already taken"


class InvalidPayload(GameError):
    message = "Code and name are required"
