"""Game domain services: round selection and quiz scoring.

This package contains pure domain logic that is called by the event router,
keeping transport concerns separated from the mini-game mechanics.
"""

from .rounds import start_round
from .scoring import score_quiz_answer

__all__ = ['start_round', 'score_quiz_answer']
