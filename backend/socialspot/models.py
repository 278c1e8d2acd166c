from dataclasses import dataclass
from typing import Optional


@dataclass
class UserSession:
    """One connected user, alive for the lifetime of a single socket."""
    connection_id: str
    public_id: str
    display_name: str
    avatar_ref: str = ''
    current_local_id: Optional[str] = None
    score: int = 0

    def to_dict(self):
        return {
            'id': self.public_id,
            'name': self.display_name,
            'avatar': self.avatar_ref,
            'socketId': self.connection_id,
            'localId': self.current_local_id,
            'score': self.score,
        }


@dataclass
class GameSession:
    local_id: str
    kind: str
    active: bool = True
    # Only set for quiz rounds
    correct_answer_index: Optional[int] = None

    @property
    def is_quiz(self) -> bool:
        return self.active and self.kind == 'quiz' and self.correct_answer_index is not None