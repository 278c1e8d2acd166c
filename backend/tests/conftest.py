import os
import random
import sys
import pytest

# Ensure the backend root (containing the `socialspot` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from socialspot import create_app, socketio
from socialspot.router import EventRouter
from socialspot.store import SessionStore


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    QUIZ_REWARD_POINTS = 10
    FRONTEND_DIST = os.path.join(CURRENT_DIR, 'no-frontend-build')
    PLACES_UPSTREAM_ENABLED = False
    PLACES_SEARCH_RADIUS_M = 2000
    PLACES_TIMEOUT_SEC = 1
    PLACES_RESULT_LIMIT = 20
    PLACES_USER_AGENT = 'SocialSpot-tests'
    GEOCODER_URL = 'http://geocoder.invalid/search'
    POI_URL = 'http://poi.invalid/interpreter'
    LOG_LEVEL = 'DEBUG'


class FirstItemRandom(random.Random):
    """RNG that always picks the first item of a pool."""

    def randrange(self, *args, **kwargs):
        return 0


class RecordingEmitter:
    """Collects outbound events as (connection_id, event, payload) tuples."""

    def __init__(self):
        self.sent = []

    def __call__(self, event, payload, connection_id):
        self.sent.append((connection_id, event, payload))

    def to(self, connection_id, event=None):
        return [p for cid, e, p in self.sent if cid == connection_id and (event is None or e == event)]

    def events(self, event):
        return [(cid, p) for cid, e, p in self.sent if e == event]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def emitter():
    return RecordingEmitter()


@pytest.fixture()
def store():
    return SessionStore()


@pytest.fixture()
def router(store, emitter):
    return EventRouter(store, emitter, rng=FirstItemRandom())


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig, rng=FirstItemRandom())
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    """Factory for connected Socket.IO test clients, disconnected on teardown."""
    created = []

    def connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/'
        )
        created.append(test_client)
        return test_client

    yield connect
    for test_client in created:
        try:
            if test_client.is_connected('/'):
                test_client.disconnect(namespace='/')
        except Exception:
            pass
