import pytest

from fuzzylabel.fuzzy.core.mfs import Constant, Triangular
from fuzzylabel.fuzzy.io.rule_parser import RuleFileError, parse_rules, parse_rules_string
from fuzzylabel.fuzzy.core.types import FuzzyError

from conftest import TICKETS_FZR


def test_parse_ticket_rules(rules_file):
    rb = parse_rules(str(rules_file))
    assert list(rb.sets) == ["Urgent", "Medium", "Low"]
    assert rb.sets["Urgent"].membership_function == Triangular(0.8, 1.0, 1.2)
    assert [r.weight for r in rb.rules] == [1.0, 0.5, 0.2]
    assert [r.active for r in rb.rules] == [True, True, False]
    assert rb.default_label == "Unknown"
    assert rb.domain == (0.0, 1.0, 0.01)
    assert rb.defuzz == "centroid"
    assert rb.scale is None


def test_engine_from_rule_file():
    engine = parse_rules_string(TICKETS_FZR).build_engine()
    assert engine.infer(0.95) == "Urgent"
    assert engine.infer(0.6) == "Medium"
    # inactive Low rule
    assert engine.infer(0.1) == "Unknown"


def test_rule_texts_follow_rules():
    rb = parse_rules_string(TICKETS_FZR)
    assert rb.rule_texts[0] == "x > 0.9"
    assert rb.rule_texts[2] == "x < 0.2 AND x >= 0"


def test_named_input_membership_condition_and_forward_sets():
    rb = parse_rules_string(
        'input score\n'
        'rule IF score >= 0.5 AND score in Mid 0.4 THEN "High Priority" weight 0.7\n'
        'rule if score in Mid then Mid\n'
        'set Mid tri 0.3 0.55 0.8\n'
        'set "High Priority" const 1 0 1\n'
        'scale "High Priority" 2 1.5\n'
        'scale Mid 1 -inf\n'
    )
    engine = rb.build_engine()
    assert rb.sets["High Priority"].membership_function == Constant(1.0, 0.0, 1.0)
    assert engine.infer(0.55) == "Mid"           # 1.0 (Mid) > 0.7
    assert engine.strengths(0.55) == {"High Priority": 0.7, "Mid": 1.0}
    assert engine.infer(0.75) == "Unknown"       # μ_Mid(0.75) = 0.2
    assert [lv[0] for lv in rb.scale.levels] == ["High Priority", "Mid"]


def test_comments_and_blank_lines_are_ignored():
    rb = parse_rules_string("\n# only a comment\nset A const 1 0 1  # trailing\n")
    assert list(rb.sets) == ["A"]
    assert rb.rules == []


@pytest.mark.parametrize("source,fragment", [
    ("rule IF x > 0.9 THEN Missing", "unknown consequence set"),
    ("set A tri 1 0 2", "non-decreasing"),
    ("set A tri 0 1", "expected 3 parameters"),
    ("set A blob 0 1", "Unknown MF shape"),
    ("set A gauss 0 0", "sigma"),
    ("set A const 1 0 1\nset A const 1 0 1", "Duplicate set"),
    ("bogus 1", "Unknown directive"),
    ("set A const 1 0 1\nrule IF y > 1 THEN A", "must start with input"),
    ("set A const 1 0 1\nrule x > 1 THEN A", "must start with IF"),
    ("set A const 1 0 1\nrule IF x > 1 A", "missing THEN"),
    ("set A const 1 0 1\nrule IF x ~ 1 THEN A", "Unknown operator"),
    ("set A const 1 0 1\nrule IF x > abc THEN A", "abc"),
    ("set A const 1 0 1\nrule IF x > 1 AND THEN A", "dangling AND"),
    ("set A const 1 0 1\nrule IF x > 1 THEN A weight", "weight <w>"),
    ("set A const 1 0 1\nrule IF x in B THEN A", "unknown set 'B'"),
    ("domain 1 0 0.1", "domain"),
    ("domain 0 1 0", "step"),
    ("defuzz lom", "defuzz"),
    ('set "A tri 0 1 2', "tokenize"),
])
def test_errors_carry_context(source, fragment):
    with pytest.raises(RuleFileError) as exc:
        parse_rules_string(source)
    assert fragment in str(exc.value)
    assert "[.fzr:" in str(exc.value)


def test_error_reports_line_number():
    with pytest.raises(RuleFileError) as exc:
        parse_rules_string("set A const 1 0 1\n\nrule IF x > 1 THEN Nope\n")
    assert exc.value.line == 3
    assert isinstance(exc.value, FuzzyError)


def test_rule_text_keeps_input_name_in_force_when_parsed():
    rb = parse_rules_string(
        "set A const 1 0 1\n"
        "rule IF x > 0.5 THEN A\n"
        "input score\n"
        "rule IF score < 0.2 THEN A\n"
    )
    assert rb.rule_texts == ["x > 0.5", "score < 0.2"]
    engine = rb.build_engine()
    assert engine.strengths(0.7) == {"A": 1.0}
    assert engine.strengths(0.1) == {"A": 1.0}
