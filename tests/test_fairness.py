# FILE: tests/test_fairness.py
from roles_core.fairness import fairness_bound, fairness_report
from roles_core.ledger import FairnessLedger
from roles_core.engine_test_helpers import quick_person

def test_fairness_bound():
    assert fairness_bound(48, 6) == 10
    assert fairness_bound(10, 4, slack=0) == 3
    assert fairness_bound(10, 0) == 0

def test_fairness_report_orders_busiest_first():
    people = [quick_person("ann"), quick_person("bob")]
    ledger = FairnessLedger(people)
    ledger.record("bob", 0, "Opening Prayer (M1S1)")
    df = fairness_report(ledger.snapshot(), people)
    assert list(df.columns) == ["name", "role_count", "last_position", "assignments"]
    assert df.iloc[0]["name"] == "Bob"
    assert df.iloc[0]["assignments"] == "Opening Prayer (M1S1)"
    assert df.iloc[1]["last_position"] == -10
