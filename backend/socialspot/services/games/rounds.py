import random
from typing import Any, Dict, Optional

from socialspot.models import GameSession
from socialspot.store import SessionStore
from .content import POOLS


def pick(pool, rng=random):
    """Uniform pick over the pool's current size."""
    return pool[rng.randrange(len(pool))]


def start_round(store: SessionStore, local_id: str, kind: str, rng=random) -> Optional[Dict[str, Any]]:
    """Open a new round in the room's game slot and return its public content.

    The previous round for ``local_id`` is overwritten, whatever its kind.
    Returns None for an unknown kind, leaving the slot untouched.
    """
    pool = POOLS.get(kind)
    if not pool:
        return None

    item = pick(pool, rng)
    if kind == 'quiz':
        store.set_game(GameSession(local_id=local_id, kind=kind, correct_answer_index=item['correct']))
        return {
            'type': kind,
            'kind': kind,
            'text': item['text'],
            'options': list(item['options']),
            'correct': item['correct'],
        }

    store.set_game(GameSession(local_id=local_id, kind=kind))
    return {'type': kind, 'kind': kind, 'text': item}
