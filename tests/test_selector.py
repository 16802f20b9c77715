import random

import pytest

from carrotfacts.facts import Fact, RandomSelector, RoundRobinSelector

FACTS = tuple(Fact(text=f"fact {i}", id=i) for i in range(4))


def test_round_robin_visits_each_fact_once_per_cycle():
    selector = RoundRobinSelector(FACTS)

    first_cycle = [selector.next() for _ in FACTS]

    assert first_cycle == list(FACTS)
    assert selector.next() == FACTS[0]


def test_round_robin_cursor_stays_in_range():
    selector = RoundRobinSelector(FACTS)
    for _ in range(3 * len(FACTS) + 1):
        selector.next()
        assert 0 <= selector.cursor < len(FACTS)


def test_round_robin_single_fact():
    selector = RoundRobinSelector(FACTS[:1])
    assert [selector.next() for _ in range(3)] == [FACTS[0]] * 3


def test_random_uses_injected_rng():
    selector = RandomSelector(FACTS, rng=random.Random(1234))
    expected_rng = random.Random(1234)

    draws = [selector.next() for _ in range(20)]

    assert draws == [FACTS[expected_rng.randrange(len(FACTS))] for _ in range(20)]


def test_random_is_not_stuck_on_one_index():
    selector = RandomSelector(FACTS)

    seen = {selector.next().id for _ in range(400)}

    assert len(seen) > 1
    assert seen <= {f.id for f in FACTS}


def test_random_default_rngs_are_independently_seeded():
    a = RandomSelector(FACTS)
    b = RandomSelector(FACTS)
    assert [a.rng.random() for _ in range(4)] != [b.rng.random() for _ in range(4)]


@pytest.mark.parametrize("cls", [RandomSelector, RoundRobinSelector])
def test_empty_collection_rejected(cls):
    with pytest.raises(ValueError):
        cls(())
