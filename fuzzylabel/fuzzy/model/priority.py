from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple
from ..core.rule import RuleMatch
from ..core.types import Float, FuzzyError

Level = Tuple[str, Float, Float]  # (label, score, threshold)

@dataclass(frozen=True)
class PriorityScale:
    """
    Skala porządkowa etykiet: label -> score oraz progi score -> label.
    levels: od najwyższego poziomu; ostatni poziom łapie wszystko poniżej progów.
    """
    levels: Tuple[Level, ...]

    def __init__(self, levels: Sequence[Level]):
        ordered = tuple(sorted(((str(l), float(s), float(t)) for l, s, t in levels),
                               key=lambda lv: lv[2], reverse=True))
        if not ordered:
            raise FuzzyError("PriorityScale needs at least one level")
        object.__setattr__(self, "levels", ordered)

    @property
    def lowest(self) -> str:
        return self.levels[-1][0]

    def score_of(self, label: str) -> Float:
        for lab, score, _thr in self.levels:
            if lab == label:
                return score
        return 0.0

    def label_for(self, score: Float) -> str:
        for lab, _score, thr in self.levels:
            if score >= thr:
                return lab
        return self.lowest

    def decide(self, matches: Iterable[RuleMatch]) -> str:
        total = 0.0
        weighted = 0.0
        for m in matches:
            weighted += self.score_of(m.label) * m.weight
            total += m.weight
        if total > 0.0:
            return self.label_for(weighted / total)
        return self.lowest

TICKET_PRIORITY = PriorityScale([
    ("Urgent", 3.0, 2.5),
    ("High Priority", 2.0, 1.5),
    ("Medium Priority", 1.0, 0.5),
    ("Low Priority", 0.0, float("-inf")),
])
