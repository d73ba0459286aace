from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.fuzzy_set import FuzzySet
from ..core.rule import FuzzyRule
from ..core.types import Float
from .engine import DEFAULT_LABEL, InferenceEngine
from .priority import Level, PriorityScale


@dataclass
class RuleBase:
    """
    Wczytany zestaw reguł (plik .fzr) przed zbudowaniem silnika:
      - sets:   nazwa -> FuzzySet (w kolejności deklaracji)
      - rules:  reguły w kolejności z pliku (kolejność rozstrzyga remisy)
      - domain: (min, max, step) do defuzyfikacji
    """
    sets: Dict[str, FuzzySet] = field(default_factory=dict)
    rules: List[FuzzyRule] = field(default_factory=list)
    # opis warunków do wyświetlania (równoległy do rules)
    rule_texts: List[str] = field(default_factory=list)

    default_label: str = DEFAULT_LABEL
    domain: Tuple[Float, Float, Float] = (0.0, 1.0, 0.01)
    defuzz: str = "centroid"
    scale_levels: List[Level] = field(default_factory=list)

    def add_set(self, fs: FuzzySet) -> None:
        self.sets[fs.name] = fs

    def add_rule(self, rule: FuzzyRule, text: str = "") -> None:
        self.rules.append(rule)
        self.rule_texts.append(text)

    @property
    def scale(self) -> Optional[PriorityScale]:
        return PriorityScale(self.scale_levels) if self.scale_levels else None

    def build_engine(self) -> InferenceEngine:
        return InferenceEngine(self.rules, default_label=self.default_label)
