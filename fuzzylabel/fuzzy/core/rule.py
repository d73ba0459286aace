from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Optional
from .fuzzy_set import FuzzySet
from .types import Float, Predicate

class RuleMatch(NamedTuple):
    consequence: FuzzySet
    weight: Float

    @property
    def label(self) -> str:
        return self.consequence.name

@dataclass(frozen=True)
class FuzzyRule:
    condition: Predicate      # czysty predykat x -> bool
    consequence: FuzzySet
    weight: Float = 1.0
    active: bool = True

    def evaluate(self, x: Float) -> Optional[RuleMatch]:
        """Jedno wywołanie warunku; prawda -> RuleMatch(consequence, weight), inaczej None."""
        if not self.active:
            return None
        if self.condition(x):
            return RuleMatch(self.consequence, self.weight)
        return None
