# FILE: tests/test_ranking.py
import numpy as np
from roles_core.ledger import FairnessLedger
from roles_core.models import EngineConfig
from roles_core.ranking import candidate_weight, candidate_weights, rank_candidates
from roles_core.engine_test_helpers import quick_person

def test_weight_for_someone_never_assigned():
    p = quick_person("Ann")
    ledger = FairnessLedger([p])
    # 100 base + 100 count bonus + 50 capped recency + 20 first-assignment
    assert candidate_weight(p, 0, set(), ledger, EngineConfig()) == 270

def test_weight_for_recently_used_person():
    p = quick_person("Ann")
    ledger = FairnessLedger([p])
    for pos in (1, 2, 3):
        ledger.record(p.key, pos, "x")
    # 100 - 60 used + 70 count bonus + 5 recency
    assert candidate_weight(p, 4, {p.key}, ledger, EngineConfig()) == 115

def test_weight_is_floored():
    p = quick_person("Ann")
    ledger = FairnessLedger([p])
    config = EngineConfig(used_penalty=1000)
    assert candidate_weight(p, 0, {p.key}, ledger, config) == 5

def _spread_ledger():
    a, b, c = quick_person("A"), quick_person("B"), quick_person("C")
    ledger = FairnessLedger([a, b, c])
    ledger.record(b.key, 19, "x")
    ledger.record(c.key, 18, "x")
    ledger.record(c.key, 19, "x")
    return [c, b, a], ledger

def test_wide_gaps_rank_the_same_for_any_seed():
    people, ledger = _spread_ledger()
    weights = dict((p.key, w) for p, w in candidate_weights(people, 20, set(), ledger))
    assert weights == {"a": 270, "b": 195, "c": 185}
    for seed in range(10):
        ranked = rank_candidates(people, 20, set(), ledger, np.random.default_rng(seed))
        assert [p.key for p in ranked] == ["a", "b", "c"]

def test_near_equal_weights_are_shuffled():
    people = [quick_person("D"), quick_person("E")]
    ledger = FairnessLedger(people)
    orders = set()
    for seed in range(50):
        ranked = rank_candidates(people, 0, set(), ledger, np.random.default_rng(seed))
        orders.add(tuple(p.key for p in ranked))
    assert orders == {("d", "e"), ("e", "d")}

def test_ranking_is_pure_and_repeatable():
    people, ledger = _spread_ledger()
    before = ledger.snapshot()
    w1 = candidate_weights(people, 20, {"b"}, ledger)
    w2 = candidate_weights(people, 20, {"b"}, ledger)
    assert w1 == w2
    r1 = rank_candidates(people, 20, {"b"}, ledger, np.random.default_rng(3))
    r2 = rank_candidates(people, 20, {"b"}, ledger, np.random.default_rng(3))
    assert r1 == r2
    assert ledger.snapshot() == before

def test_empty_candidates():
    assert rank_candidates([], 0, set(), FairnessLedger(), np.random.default_rng(0)) == []

def test_shuffle_never_swaps_weights_a_band_apart():
    people = [quick_person(n) for n in "abcde"]
    ledger = FairnessLedger(people)
    # one assignment each; last positions 10..6 give recency 5..25
    for p, last in zip(people, (10, 9, 8, 7, 6)):
        ledger.record(p.key, last, "x")
    weights = dict((p.key, w) for p, w in candidate_weights(people, 11, set(), ledger))
    assert weights == {"a": 195, "b": 200, "c": 205, "d": 210, "e": 215}
    orders = set()
    for seed in range(200):
        ranked = [p.key for p in rank_candidates(people, 11, set(), ledger, np.random.default_rng(seed))]
        orders.add(tuple(ranked))
        for i, hi in enumerate(ranked):
            for lo in ranked[i + 1:]:
                assert weights[hi] > weights[lo] - 10
        assert ranked[-1] == "a"
    # near neighbours still swap
    assert len(orders) > 1
