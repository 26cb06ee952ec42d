# FILE: tests/test_cli.py
import json
import pandas as pd

from run_roster import main

def test_generate_from_sample_assets(tmp_path, capsys):
    assets = tmp_path / "assets"
    assert main(["init-assets", "--dir", str(assets)]) == 0
    out = tmp_path / "roles.csv"
    code = main(["generate", "--roster", str(assets / "roster.yaml"), "--slots", str(assets / "slots.yaml"),
                 "--seed", "3", "--out", str(out), "--report"])
    assert code == 0
    df = pd.read_csv(out)
    assert len(df) == 13
    assert "Scripture Reading" in df.columns
    printed = capsys.readouterr().out
    assert "people assigned roles" in printed
    assert "role_count" in printed

def test_generate_reports_malformed_slots(tmp_path, capsys):
    roster = tmp_path / "roster.json"
    roster.write_text(json.dumps({"openingprayer": [{"name": "ann"}]}), encoding="utf-8")
    slots = tmp_path / "slots.csv"
    slots.write_text("grouping,date\nJanuary,2026-01-04\nJanuary,\n", encoding="utf-8")
    code = main(["generate", "--roster", str(roster), "--slots", str(slots)])
    assert code == 1
    assert "slot 2 has no date" in capsys.readouterr().err

def test_generate_warns_about_empty_junior_pool(tmp_path, capsys):
    roster = tmp_path / "roster.json"
    roster.write_text(json.dumps({
        "openingprayer": ["ann"], "praiseandworship": ["bob"], "reading": ["cy", "dee"],
        "intercessory": ["eve"], "offertoryprayer": ["fay"],
    }), encoding="utf-8")
    slots = tmp_path / "slots.csv"
    slots.write_text("grouping,date\nJanuary,2026-01-04\nJanuary,2026-01-11\n", encoding="utf-8")
    code = main(["generate", "--roster", str(roster), "--slots", str(slots), "--seed", "1"])
    assert code == 0
    printed = capsys.readouterr().out
    assert "no eligible people configured for 'Scripture Reading [first]'" in printed
    assert "Scripture Reading [rest]" not in printed
