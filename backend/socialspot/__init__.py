import os
import random

import click
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(raw):
    origins = [o.strip() for o in (raw or '*').split(',') if o.strip()]
    return '*' if not origins or '*' in origins else origins


def create_app(config_class=Config, rng=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Each app owns its own session store and router
    from socialspot.socketio_events import build_router, register_socketio_handlers
    router = build_router(flask_app, rng=rng or random.Random())
    flask_app.extensions['socialspot'] = router
    register_socketio_handlers(flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    from socialspot.places import places
    flask_app.register_blueprint(places, url_prefix='/api')

    from socialspot.main import main
    flask_app.register_blueprint(main)

    dist = flask_app.config.get('FRONTEND_DIST')
    if not dist or not os.path.isdir(dist):
        flask_app.logger.error(
            f"Frontend build not found at {dist}; run the frontend build before serving the web client"
        )

    @click.command('room-stats')
    def room_stats_command():
        """Prints the in-memory connection, session, room and game counts."""
        for key, value in router.store.stats().items():
            print(f'{key}: {value}')

    flask_app.cli.add_command(room_stats_command)

    return flask_app
