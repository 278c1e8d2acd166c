import random
from collections import Counter

import pytest

from socialspot.models import UserSession
from socialspot.services.games import score_quiz_answer, start_round
from socialspot.services.games.content import POOLS, QUIZ_QUESTIONS


class SpyRandom(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value
        self.bounds = []

    def randrange(self, *args, **kwargs):
        self.bounds.append(args)
        return self.value


@pytest.mark.parametrize('kind', sorted(POOLS))
def test_pools_are_non_empty(kind):
    assert POOLS[kind]


def test_quiz_answers_point_at_an_option():
    for question in QUIZ_QUESTIONS:
        assert 0 <= question['correct'] < len(question['options'])


@pytest.mark.parametrize('kind', sorted(POOLS))
def test_selection_spans_the_whole_pool(store, kind):
    rng = SpyRandom(len(POOLS[kind]) - 1)
    start_round(store, 'L', kind, rng)
    assert rng.bounds == [(len(POOLS[kind]),)]


def test_repeated_rounds_cover_every_question(store):
    rng = random.Random(1234)
    seen = Counter()
    for _ in range(2000):
        content = start_round(store, 'L', 'quiz', rng)
        seen[content['text']] += 1
    # Uniform over 12 questions: each shows up, none dominates
    assert set(seen) == {q['text'] for q in QUIZ_QUESTIONS}
    assert max(seen.values()) < 2 * min(seen.values())


def test_quiz_round_stores_correct_index(store):
    content = start_round(store, 'L', 'quiz', SpyRandom(3))
    game = store.get_game('L')
    assert game.kind == 'quiz'
    assert game.active
    assert game.correct_answer_index == QUIZ_QUESTIONS[3]['correct'] == content['correct']


def test_unknown_kind_leaves_slot_untouched(store):
    start_round(store, 'L', 'truth_dare', SpyRandom(0))
    assert start_round(store, 'L', 'charades', SpyRandom(0)) is None
    assert store.get_game('L').kind == 'truth_dare'


def test_scoring_is_per_answer(store):
    start_round(store, 'L', 'quiz', SpyRandom(0))
    correct = store.get_game('L').correct_answer_index
    session = UserSession(connection_id='a', public_id='u', display_name='Ana')

    assert score_quiz_answer(store, session, 'L', correct) == 10
    assert score_quiz_answer(store, session, 'L', correct + 1) is None
    assert score_quiz_answer(store, session, 'L', correct, reward=5) == 15
    assert score_quiz_answer(store, session, 'elsewhere', correct) is None
    assert session.score == 15
