"""In-memory runtime state for one server instance.

A ``SessionStore`` owns the maps the event router works on:

- connections: every live connection id, with or without a session
- sessions: connection id -> ``UserSession``
- rooms: local id -> checked-in connection ids, in check-in order
- games: local id -> the single ``GameSession`` slot of that room

Room membership is kept explicitly next to the session map and is only
changed through ``check_in``/``leave_room``/``remove`` so that ``rooms[L]``
always equals the sessions whose ``current_local_id == L``. Callers are
expected to serialize access (see ``EventRouter``).
"""
from typing import Dict, List, Optional, Set

from socialspot.models import GameSession, UserSession


class SessionStore:
    def __init__(self):
        self.connections: Set[str] = set()
        self.sessions: Dict[str, UserSession] = {}
        # Dict keys used as an insertion-ordered set
        self.rooms: Dict[str, Dict[str, None]] = {}
        self.games: Dict[str, GameSession] = {}

    # ---- Connection registry ----

    def connect(self, connection_id: str) -> None:
        self.connections.add(connection_id)

    def join(self, connection_id: str, public_id: str, display_name: str, avatar_ref: str = '') -> UserSession:
        # A second join_app on the same socket replaces the session
        if connection_id in self.sessions:
            self.leave_room(connection_id)
        session = UserSession(
            connection_id=connection_id,
            public_id=public_id,
            display_name=display_name,
            avatar_ref=avatar_ref,
        )
        self.connections.add(connection_id)
        self.sessions[connection_id] = session
        return session

    def get(self, connection_id: Optional[str]) -> Optional[UserSession]:
        if connection_id is None:
            return None
        return self.sessions.get(connection_id)

    def remove(self, connection_id: str) -> Optional[UserSession]:
        """Drop the connection and its session, returning the session if any."""
        self.leave_room(connection_id)
        self.connections.discard(connection_id)
        return self.sessions.pop(connection_id, None)

    # ---- Room directory ----

    def check_in(self, connection_id: str, local_id: str) -> Optional[str]:
        """Move a session into ``local_id``; returns the room it left, if any."""
        session = self.sessions[connection_id]
        previous = session.current_local_id
        if previous is not None and previous != local_id:
            self.leave_room(connection_id)
        session.current_local_id = local_id
        self.rooms.setdefault(local_id, {})[connection_id] = None
        return previous if previous != local_id else None

    def leave_room(self, connection_id: str) -> Optional[str]:
        session = self.sessions.get(connection_id)
        if session is None or session.current_local_id is None:
            return None
        local_id = session.current_local_id
        members = self.rooms.get(local_id)
        if members is not None:
            members.pop(connection_id, None)
            if not members:
                del self.rooms[local_id]
        session.current_local_id = None
        return local_id

    def members(self, local_id: str) -> List[UserSession]:
        return [self.sessions[cid] for cid in self.rooms.get(local_id, ())]

    def member_ids(self, local_id: str) -> List[str]:
        return list(self.rooms.get(local_id, ()))

    # ---- Game state table ----

    def set_game(self, game: GameSession) -> None:
        self.games[game.local_id] = game

    def get_game(self, local_id: str) -> Optional[GameSession]:
        return self.games.get(local_id)

    def stats(self):
        return {
            'connections': len(self.connections),
            'sessions': len(self.sessions),
            'rooms': len(self.rooms),
            'games': len(self.games),
        }
