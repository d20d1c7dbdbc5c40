# Inbound
JOIN_ROOM = "join-room"
SWITCH_TEAM = "switch-team"
SET_TIME = "set-time"
START_GAME = "start-game"
DRAW = "draw"
GUESS = "guess"

# Outbound
STATE_UPDATE = "state-update"
ROUND_STARTED = "round-started"
TICK = "tick"
STROKE = "stroke"
GUESS_RESULT = "guess-result"
GAME_ENDED = "game-ended"

CORRECT_MESSAGE = "Correct!"
INCORRECT_MESSAGE = "Incorrect!"
