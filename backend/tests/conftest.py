import os
import sys
import pytest

# Ensure the backend root (containing the `drawbattle` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from drawbattle.config import Config
from drawbattle.game import registry
from drawbattle.server import create_app


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    TRUST_PROXY_HEADERS = False
    SOCKETIO_ASYNC_MODE = 'threading'
    TICK_INTERVAL_SEC = 0.01
    WORD_BATCH_SIZE = 10
    DEFAULT_ROUND_MINUTES = 5


class FakeWordSource:
    """Hands out queued batches, then a fixed default batch."""

    default_batch = ['Dog', 'Bird', 'Cat']

    def __init__(self, batches=None):
        self.batches = [list(b) for b in (batches or [])]
        self.calls = []

    def fetch_words(self, topic, count):
        self.calls.append((topic, count))
        if self.batches:
            return self.batches.pop(0)
        return list(self.default_batch)


@pytest.fixture()
def word_source():
    return FakeWordSource()


@pytest.fixture(autouse=True)
def _fresh_registry(word_source):
    registry.clear_rooms()
    registry.set_word_source(word_source)
    yield
    # Clearing the registry also stops any countdown still running.
    registry.clear_rooms()
    registry.set_word_source(None)


@pytest.fixture()
def app_and_socketio(word_source):
    return create_app(TestConfig, word_source=word_source)


@pytest.fixture()
def flask_app(app_and_socketio):
    application, _ = app_and_socketio
    with application.app_context():
        yield application


@pytest.fixture()
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app, socketio):
    clients = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def room():
    return registry.create_room('animals')
