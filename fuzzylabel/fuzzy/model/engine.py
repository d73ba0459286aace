from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from ..core import norms
from ..core.defuzz import METHODS
from ..core.fuzzy_set import FuzzySet
from ..core.rule import FuzzyRule, RuleMatch
from ..core.types import Float, FuzzyError
from .priority import PriorityScale

log = logging.getLogger(__name__)

DEFAULT_LABEL = "Unknown"

class InferenceEngine:
    """
    Ważone głosowanie reguł dla jednego wejścia skalarnego.

    Każda reguła, której warunek jest spełniony, oddaje swoją (statyczną) wagę
    na etykietę = nazwę zbioru konsekwentu. Wygrywa etykieta z największą
    sumą wag; przy remisie ta, która pojawiła się wcześniej w kolejności reguł.
    Brak dopasowań -> default_label.

    Reguły są zamrożone w krotce przy konstrukcji; silnik nie trzyma stanu
    między wywołaniami, więc jedną instancję można wołać z wielu wątków.
    """

    def __init__(self, rules: Iterable[FuzzyRule], default_label: str = DEFAULT_LABEL) -> None:
        self.rules: Tuple[FuzzyRule, ...] = tuple(rules)
        self.default_label = default_label

    def __len__(self) -> int:
        return len(self.rules)

    # ---------- API ----------

    def matches(self, x: Float) -> List[RuleMatch]:
        out = []
        for rule in self.rules:
            m = rule.evaluate(x)
            if m is not None:
                out.append(m)
        return out

    def strengths(self, x: Float) -> Dict[str, Float]:
        """Etykieta -> suma wag; kolejność kluczy = kolejność pierwszego wystąpienia."""
        acc: Dict[str, Float] = {}
        for m in self.matches(x):
            acc[m.label] = acc.get(m.label, 0.0) + m.weight
        return acc

    def infer(self, x: Float) -> str:
        acc = self.strengths(x)
        if not acc:
            log.debug("x=%r: no rule matched, using %r", x, self.default_label)
            return self.default_label
        chosen = None
        best = 0.0
        for label, w in acc.items():
            # tylko ostro większa waga wypiera wcześniejszą etykietę
            if chosen is None or w > best:
                chosen, best = label, w
        log.debug("x=%r: strengths=%s -> %r", x, acc, chosen)
        return chosen

    def infer_scored(self, x: Float, scale: PriorityScale) -> str:
        """Średnia ważona rang etykiet, zmapowana z powrotem progami skali."""
        return scale.decide(self.matches(x))

    def explain(self, x: Float) -> Dict[str, Any]:
        """
        Szczegóły wnioskowania dla jednego wejścia, w formacie JSON-owalnym:
          {
            "input": float,
            "rules": [{"rule_index", "label", "weight", "active", "fired"}, ...],
            "strengths": {label: weight, ...},
            "chosen": str
          }
        """
        rows = []
        for i, rule in enumerate(self.rules):
            m = rule.evaluate(x)
            rows.append({
                "rule_index": i,
                "label": rule.consequence.name,
                "weight": float(rule.weight),
                "active": rule.active,
                "fired": m is not None,
            })
        return {
            "input": x,
            "rules": rows,
            "strengths": self.strengths(x),
            "chosen": self.infer(x),
        }

    # ---------- defuzyfikacja konsekwentów ----------

    def consequences(self, x: Optional[Float] = None) -> List[FuzzySet]:
        if x is None:
            return [r.consequence for r in self.rules if r.active]
        return [m.consequence for m in self.matches(x)]

    def aggregate(self, x: Optional[Float] = None) -> FuzzySet:
        """Suma (max) zbiorów konsekwentów: wszystkich aktywnych reguł albo tylko dopasowanych do x."""
        sets = self.consequences(x)

        def mu(y: Float) -> Float:
            return norms.fold(norms.s_max, (s.membership_function(y) for s in sets), 0.0)
        name = "Aggregate(" + ", ".join(s.name for s in sets) + ")"
        return FuzzySet(name, mu)

    def defuzzify(self, min_val: Float, max_val: Float, step: Float,
                  method: str = "centroid", x: Optional[Float] = None) -> Float:
        fn = METHODS.get(method.lower())
        if fn is None:
            raise FuzzyError(f"Unknown defuzzification method '{method}' (allowed: {', '.join(METHODS)})")
        return fn(min_val, max_val, step, self.aggregate(x).membership_function)
