import pytest

from fuzzylabel.fuzzy.core.fuzzy_set import FuzzySet
from fuzzylabel.fuzzy.core.mfs import Triangular
from fuzzylabel.fuzzy.core.rule import FuzzyRule
from fuzzylabel.fuzzy.model.engine import InferenceEngine

TICKETS_FZR = """\
# ticket triage
set Urgent tri 0.8 1.0 1.2
set Medium tri 0.3 0.55 0.8
set Low    tri -0.2 0.0 0.3

rule IF x > 0.9 THEN Urgent weight 1.0
rule IF x > 0.5 THEN Medium weight 0.5
rule IF x < 0.2 AND x >= 0 THEN Low weight 0.2 inactive

default Unknown
domain 0 1 0.01
defuzz centroid
"""


@pytest.fixture
def urgent():
    return FuzzySet("Urgent", Triangular(0.8, 1.0, 1.2))


@pytest.fixture
def medium():
    return FuzzySet("Medium", Triangular(0.3, 0.55, 0.8))


@pytest.fixture
def engine(urgent, medium):
    return InferenceEngine([
        FuzzyRule(lambda x: x > 0.9, urgent, 1.0),
        FuzzyRule(lambda x: x > 0.5, medium, 0.5),
    ])


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "tickets.fzr"
    path.write_text(TICKETS_FZR, encoding="utf-8")
    return path
