# FILE: tests/test_ledger.py
import pytest
from roles_core.ledger import FairnessLedger
from roles_core.engine_test_helpers import quick_person

def test_new_ledger_starts_everyone_unassigned():
    ledger = FairnessLedger([quick_person("Ann"), quick_person("Bob")])
    assert len(ledger) == 2
    assert ledger.role_count("ann") == 0
    assert ledger.last_position("bob") == -10
    assert ledger.log("ann") == []

def test_record_updates_count_position_and_log():
    ledger = FairnessLedger([quick_person("Ann")])
    ledger.record("ann", 3, "Opening Prayer (M1S4)")
    ledger.record("ann", 12, "Offertory Prayer (M2S3)")
    assert ledger.role_count("ann") == 2
    assert ledger.last_position("ann") == 12
    assert ledger.log("ann") == ["Opening Prayer (M1S4)", "Offertory Prayer (M2S3)"]
    assert ledger.total_assignments() == 2
    assert ledger.people_assigned() == 1

def test_record_sets_position_unconditionally():
    ledger = FairnessLedger([quick_person("Ann")])
    ledger.record("ann", 10, "a")
    ledger.record("ann", 4, "b")
    assert ledger.last_position("ann") == 4

def test_snapshot_is_a_copy():
    ledger = FairnessLedger([quick_person("Ann")])
    snap = ledger.snapshot()
    snap["ann"].log.append("x")
    assert ledger.log("ann") == []

def test_separate_ledgers_do_not_share_state():
    a = FairnessLedger([quick_person("Ann")])
    b = FairnessLedger([quick_person("Ann")])
    a.record("ann", 0, "x")
    assert b.role_count("ann") == 0

def test_quick_person_rejects_blank_name():
    assert quick_person("  ann   LEE ").display == "Ann Lee"
    with pytest.raises(ValueError, match="not a usable name"):
        quick_person("   ")
