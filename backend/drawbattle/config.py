import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Server
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3001"))
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
    # Threading mode serves through Werkzeug, which Flask-SocketIO only runs when allowed.
    ALLOW_UNSAFE_WERKZEUG = os.environ.get("ALLOW_UNSAFE_WERKZEUG", "1") == "1"

    # Word source (OpenRouter chat completions)
    OPENROUTER_API_KEY = os.environ.get("OPENROUTER_API_KEY", "")
    OPENROUTER_BASE_URL = os.environ.get("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    WORD_MODEL = os.environ.get("WORD_MODEL", "mistralai/mistral-7b-instruct")
    WORD_BATCH_SIZE = int(os.environ.get("WORD_BATCH_SIZE", "10"))
    DEFAULT_TOPIC = os.environ.get("DEFAULT_TOPIC", "anything")

    # Game
    DEFAULT_ROUND_MINUTES = int(os.environ.get("DEFAULT_ROUND_MINUTES", "5"))
    GUESS_POINTS = int(os.environ.get("GUESS_POINTS", "10"))
    TICK_INTERVAL_SEC = float(os.environ.get("TICK_INTERVAL_SEC", "1.0"))
