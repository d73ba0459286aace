import csv
import logging
import json

import pytest
import yaml

from fuzzylabel.cli.main import main
from fuzzylabel.logsetup import setup_logging


def test_validate(rules_file, capsys):
    assert main(["validate", "--rules", str(rules_file)]) == 0
    out = capsys.readouterr().out
    assert "OK: sets=3, rules=3 (inactive=1)" in out
    assert "default=Unknown" in out


def test_infer_positional_and_list(rules_file, capsys):
    assert main(["infer", "--rules", str(rules_file), "0.95", "0.6", "--values", "0.1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0.95: Urgent", "0.6: Medium", "0.1: Unknown"]


def test_infer_scored_uses_ticket_scale(rules_file, capsys):
    main(["infer", "--rules", str(rules_file), "--scored", "0.95"])
    # Urgent=3, Medium has no rank -> (3*1.0 + 0*0.5) / 1.5 = 2.0
    assert capsys.readouterr().out.strip() == "0.95: High Priority"


def test_infer_requires_values(rules_file):
    with pytest.raises(SystemExit):
        main(["infer", "--rules", str(rules_file)])


def test_explain_json(rules_file, capsys):
    main(["explain", "--rules", str(rules_file), "0.6", "--json"])
    res = json.loads(capsys.readouterr().out)
    assert res["chosen"] == "Medium"
    assert [r["fired"] for r in res["rules"]] == [False, True, False]


def test_explain_text(rules_file, capsys):
    main(["explain", "--rules", str(rules_file), "0.95"])
    out = capsys.readouterr().out
    assert "R1: IF x > 0.9 THEN Urgent  weight=1  [fired]" in out
    assert "[inactive]" in out
    assert "Chosen: Urgent" in out


def test_show_fired_only(rules_file, capsys):
    main(["show", "--rules", str(rules_file), "--at", "0.95", "--fired-only"])
    out = capsys.readouterr().out
    assert "Urgent Triangular(a=0.8, b=1.0, c=1.2)" in out
    assert "R1: IF x > 0.9 THEN Urgent (w=1) [fired]" in out
    assert "R2:" in out
    assert "R3:" not in out


def test_defuzz(rules_file, capsys):
    main(["defuzz", "--rules", str(rules_file), "--method", "mom", "--at", "0.95"])
    out = capsys.readouterr().out.strip()
    assert out.startswith("mom (x=0.95): ")
    # Medium (peak 0.55) and Urgent (peak 1.0) both fire -> mean of the two maxima
    assert float(out.split(": ")[1]) == pytest.approx(0.775)


def test_apply_writes_labels(rules_file, tmp_path):
    src = tmp_path / "tickets.csv"
    src.write_text("id,score\n1,0.95\n2,0.6\n3,\n", encoding="utf-8")
    dst = tmp_path / "out.csv"
    main(["apply", "--rules", str(rules_file), "--csv", str(src), "--col", "score", "--out", str(dst)])
    with open(dst, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["id", "score", "_label", "_w_Urgent", "_w_Medium", "_w_Low"]
    assert rows[1] == ["1", "0.95", "Urgent", "1", "0.5", "0"]
    assert rows[2] == ["2", "0.6", "Medium", "0", "0.5", "0"]
    assert rows[3] == ["3", "", "", "", "", ""]


def test_apply_unknown_column(rules_file, tmp_path):
    src = tmp_path / "tickets.csv"
    src.write_text("id,score\n1,0.95\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["apply", "--rules", str(rules_file), "--csv", str(src), "--col", "prio"])


def test_run_yaml_pipeline(rules_file, tmp_path, capsys):
    cfg = tmp_path / "pipeline.yaml"
    cfg.write_text(yaml.safe_dump({
        "project": {"rules": str(rules_file)},
        "validate": {},
        "infer": {"values": [0.95, 0.1]},
    }), encoding="utf-8")
    assert main(["run", "--config", str(cfg)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "[run] validate"
    assert "[run] infer" in out
    assert out[-2:] == ["0.95: Urgent", "0.1: Unknown"]


def test_run_json_pipeline(rules_file, tmp_path, capsys):
    cfg = tmp_path / "pipeline.json"
    cfg.write_text(json.dumps({"explain": {"rules": str(rules_file), "x": 0.6, "json": True}}), encoding="utf-8")
    main(["run", "--config", str(cfg)])
    out = capsys.readouterr().out
    assert out.startswith("[run] explain")
    assert json.loads(out.split("\n", 1)[1])["chosen"] == "Medium"


def test_run_rejects_unknown_sections(rules_file, tmp_path):
    cfg = tmp_path / "pipeline.json"
    cfg.write_text(json.dumps({"learn": {"rules": str(rules_file)}}), encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["run", "--config", str(cfg)])


def test_library_errors_exit_with_code_2(tmp_path, capsys):
    bad = tmp_path / "bad.fzr"
    bad.write_text("rule IF x > 1 THEN Nope\n", encoding="utf-8")
    assert main(["validate", "--rules", str(bad)]) == 2
    assert "error: [.fzr:1]" in capsys.readouterr().err


def test_apply_non_numeric_cell(rules_file, tmp_path):
    src = tmp_path / "tickets.csv"
    src.write_text("id,score\n1,0.95\n2,high\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["apply", "--rules", str(rules_file), "--csv", str(src), "--col", "score",
              "--out", str(tmp_path / "out.csv")])
    assert "Wiersz 3" in str(exc.value)
    assert "'high'" in str(exc.value)


def test_setup_logging_is_idempotent():
    logger = setup_logging(logging.DEBUG)
    n_handlers = len(logger.handlers)
    assert setup_logging(logging.INFO) is logger
    assert len(logger.handlers) == n_handlers
    assert logger.level == logging.INFO
