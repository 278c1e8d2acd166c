from flask import current_app, request
from socialspot import socketio
from socialspot.events import Inbound
from socialspot.router import EventRouter
from socialspot.store import SessionStore


def build_router(flask_app, rng) -> EventRouter:
    """Create the event router for ``flask_app`` with a fresh session store."""
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')

    def emit_to(event, payload, connection_id):
        # Use socketio.emit since handlers address sockets other than the sender
        socketio.emit(event, payload, to=connection_id, namespace=namespace)

    return EventRouter(
        SessionStore(),
        emit_to,
        rng=rng,
        logger=flask_app.logger,
        quiz_reward=flask_app.config.get('QUIZ_REWARD_POINTS', 10),
    )


def current_router() -> EventRouter:
    return current_app.extensions['socialspot']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _make_handler(tag: Inbound):
    def handler(*args):
        # connect may carry an auth payload and disconnect a reason; neither is used
        data = args[0] if args and tag not in (Inbound.CONNECT, Inbound.DISCONNECT) else None
        current_router().dispatch(tag.value, _get_sid(), data)

    handler.__name__ = f'handle_{tag.value}'
    return handler


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register one Socket.IO handler per inbound event on ``namespace``.

    Every handler forwards to the router of the app serving the request.
    """
    for tag in Inbound:
        socketio.on_event(tag.value, _make_handler(tag), namespace=namespace)
