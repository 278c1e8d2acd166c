from typing import Optional

from socialspot.models import UserSession
from socialspot.store import SessionStore

QUIZ_REWARD_POINTS = 10


def score_quiz_answer(store: SessionStore, session: UserSession, local_id: str, answer_index: int,
                      reward: int = QUIZ_REWARD_POINTS) -> Optional[int]:
    """Apply scoring for one quiz answer.

    +reward to the answering session when ``answer_index`` matches the stored
    correct index of the room's active quiz. The round stays open, so every
    member can score once per answer they submit. Returns the new score, or
    None when nothing was awarded (no active quiz or a wrong answer).
    """
    game = store.get_game(local_id)
    if game is None or not game.is_quiz:
        return None
    if answer_index != game.correct_answer_index:
        return None
    session.score += reward
    return session.score
