"""Event router: the single entry point for client events.

Every inbound Socket.IO event ends up in ``EventRouter.dispatch``. Handlers
look up the triggering connection in the injected ``SessionStore``, mutate
it, and hand outbound events to an emitter, addressed either to one
connection or fanned out to the members of a room.

Malformed or out-of-order events never raise: missing sessions, unknown
targets and invalid game state are dropped silently.
"""
import logging
import random
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional

from socialspot.events import Inbound, Outbound
from socialspot.services.games import score_quiz_answer, start_round
from socialspot.services.games.scoring import QUIZ_REWARD_POINTS
from socialspot.store import SessionStore


def _as_dict(data: Any) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _field(data: Dict[str, Any], *names: str) -> Any:
    for name in names:
        value = data.get(name)
        if value is not None:
            return value
    return None


def _as_id(value: Any) -> Optional[str]:
    """Best-effort conversion of an id-like payload field to a non-empty string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def _as_index(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _kind_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    # The web client reads `type`; `kind` mirrors it
    kind = _field(data, 'kind', 'type')
    return {'type': kind, 'kind': kind}


def _utc_timestamp(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class EventRouter:
    def __init__(self, store: SessionStore, emit: Callable[[str, Any, str], None], rng=random,
                 logger: Optional[logging.Logger] = None, quiz_reward: int = QUIZ_REWARD_POINTS,
                 clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self._emit = emit
        self.rng = rng
        self.logger = logger or logging.getLogger(__name__)
        self.quiz_reward = max(0, int(quiz_reward))
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.RLock()
        self._handlers = {
            Inbound.CONNECT: self.on_connect,
            Inbound.DISCONNECT: self.on_disconnect,
            Inbound.JOIN_APP: self.join_app,
            Inbound.CHECK_IN: self.check_in,
            Inbound.SEND_INTERACTION: self.send_interaction,
            Inbound.SEND_INVITE: self.send_invite,
            Inbound.ANSWER_INVITE: self.answer_invite,
            Inbound.PRIVATE_MESSAGE: self.private_message,
            Inbound.START_GAME: self.start_game,
            Inbound.ANSWER_QUIZ: self.answer_quiz,
        }
        missing = set(Inbound) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for events: {sorted(e.value for e in missing)}")

    # ---- Dispatch ----

    def dispatch(self, event: str, connection_id: str, data: Any = None) -> None:
        try:
            tag = Inbound(event)
        except ValueError:
            self.logger.debug(f"[event-unknown] sid={connection_id} event={event!r}")
            return
        self.logger.debug(f"[event] sid={connection_id} event={tag.value} data={data!r}")
        with self._lock:
            try:
                self._handlers[tag](connection_id, data)
            except Exception:
                self.logger.exception(f"[event-error] sid={connection_id} event={tag.value}")

    def _send(self, connection_id: str, event: Outbound, payload: Any = None) -> None:
        # Outbound writes are fire-and-forget; one failed write never stops the rest
        try:
            self._emit(event.value, payload, connection_id)
        except Exception as exc:
            self.logger.warning(f"[emit-failed] sid={connection_id} event={event.value}: {exc}")

    def _fanout(self, connection_ids: Iterable[str], event: Outbound, payload: Any = None) -> None:
        for cid in connection_ids:
            self._send(cid, event, payload)

    def _relay(self, connection_id: str, data: Any, event: Outbound, build: Callable[..., Dict[str, Any]]) -> None:
        sender = self.store.get(connection_id)
        if sender is None:
            return
        data = _as_dict(data)
        target = self.store.get(_as_id(_field(data, 'toConnectionId', 'toSocketId')))
        if target is None:
            self.logger.debug(f"[relay-drop] sid={connection_id} event={event.value} target missing")
            return
        payload = build(sender, data)
        if payload is None:
            return
        self._send(target.connection_id, event, payload)

    # ---- Connection registry ----

    def on_connect(self, connection_id: str, data: Any = None) -> None:
        self.store.connect(connection_id)
        self.logger.info(f"[connect] sid={connection_id}")

    def on_disconnect(self, connection_id: str, data: Any = None) -> None:
        session = self.store.get(connection_id)
        local_id = session.current_local_id if session else None
        self.store.remove(connection_id)
        self.logger.info(f"[disconnect] sid={connection_id} local={local_id}")
        if local_id is None:
            return
        self._fanout(self.store.member_ids(local_id), Outbound.USER_LEFT, session.public_id)

    def join_app(self, connection_id: str, data: Any) -> None:
        data = _as_dict(data)
        public_id = _as_id(_field(data, 'id', 'publicId')) or connection_id
        name = _field(data, 'name')
        avatar = _field(data, 'avatar')
        previous = self.store.get(connection_id)
        previous_local = previous.current_local_id if previous else None
        session = self.store.join(
            connection_id,
            public_id=public_id,
            display_name=name if isinstance(name, str) else '',
            avatar_ref=avatar if isinstance(avatar, str) else '',
        )
        if previous_local is not None:
            self._fanout(self.store.member_ids(previous_local), Outbound.USER_LEFT, previous.public_id)
        self.logger.info(f"[join-app] sid={connection_id} name={session.display_name!r}")
        self._send(connection_id, Outbound.APP_JOINED, session.to_dict())

    # ---- Room directory ----

    def check_in(self, connection_id: str, data: Any) -> None:
        session = self.store.get(connection_id)
        if session is None:
            return
        local_id = _as_id(data.get('localId') if isinstance(data, dict) else data)
        if local_id is None:
            return
        # Leaving the previous room is silent; only a disconnect announces user_left
        left = self.store.check_in(connection_id, local_id)
        others = [cid for cid in self.store.member_ids(local_id) if cid != connection_id]
        self._fanout(others, Outbound.USER_ENTERED, session.to_dict())
        roster = [member.to_dict() for member in self.store.members(local_id)]
        self._send(connection_id, Outbound.ROOM_USERS, roster)
        self.logger.info(f"[check-in] sid={connection_id} local={local_id} left={left} members={len(roster)}")

    # ---- Relays ----

    def send_interaction(self, connection_id: str, data: Any) -> None:
        self._relay(connection_id, data, Outbound.RECEIVE_INTERACTION,
                    lambda sender, d: {'from': sender.to_dict(), **_kind_fields(d)})

    def send_invite(self, connection_id: str, data: Any) -> None:
        self._relay(connection_id, data, Outbound.RECEIVE_INVITE,
                    lambda sender, d: {'from': sender.to_dict(), **_kind_fields(d)})

    def answer_invite(self, connection_id: str, data: Any) -> None:
        self._relay(connection_id, data, Outbound.INVITE_ANSWERED,
                    lambda sender, d: {
                        'from': sender.to_dict(),
                        'accepted': bool(d.get('accepted')),
                        **_kind_fields(d),
                    })

    def private_message(self, connection_id: str, data: Any) -> None:
        def build(sender, d):
            message = d.get('message')
            if not isinstance(message, str):
                return None
            return {
                'fromId': sender.public_id,
                'message': message,
                'timestamp': _utc_timestamp(self._clock()),
            }

        self._relay(connection_id, data, Outbound.RECEIVE_PRIVATE_MESSAGE, build)

    # ---- Games ----

    def start_game(self, connection_id: str, data: Any) -> None:
        if self.store.get(connection_id) is None:
            return
        data = _as_dict(data)
        local_id = _as_id(data.get('localId'))
        kind = _field(data, 'kind', 'gameType')
        if local_id is None or not isinstance(kind, str):
            return
        content = start_round(self.store, local_id, kind, self.rng)
        if content is None:
            self.logger.debug(f"[game-start] sid={connection_id} unknown kind={kind!r}")
            return
        members = self.store.member_ids(local_id)
        self.logger.info(f"[game-start] local={local_id} kind={kind} members={len(members)}")
        self._fanout(members, Outbound.GAME_STARTED, content)

    def answer_quiz(self, connection_id: str, data: Any) -> None:
        session = self.store.get(connection_id)
        if session is None:
            return
        data = _as_dict(data)
        local_id = _as_id(data.get('localId'))
        answer_index = _as_index(data.get('answerIndex'))
        if local_id is None or answer_index is None:
            return
        new_score = score_quiz_answer(self.store, session, local_id, answer_index, self.quiz_reward)
        if new_score is None:
            return
        self.logger.info(f"[quiz-correct] sid={connection_id} local={local_id} score={new_score}")
        self._send(connection_id, Outbound.SCORE_UPDATE, new_score)
