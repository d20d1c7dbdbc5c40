from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from drawbattle.server import create_app  # noqa: E402

app, socketio = create_app()
