from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from . import norms
from .defuzz import centroid_on_steps, mom_on_steps, bisector_on_steps, peak_on_steps
from .types import Float, Membership

# liczba kroków siatki, gdy normalize() dostaje tylko dziedzinę
_NORMALIZE_STEPS = 200

def _with_support(mu: Membership, lo: Float, hi: Float) -> Membership:
    """Dołącz support() do złożonej funkcji, żeby zbiór pochodny znał swoją dziedzinę."""
    mu.support = lambda: (lo, hi)
    return mu

def _hull(a: Tuple[Float, Float], b: Tuple[Float, Float]) -> Tuple[Float, Float]:
    return min(a[0], b[0]), max(a[1], b[1])

@dataclass(frozen=True)
class FuzzySet:
    """
    Nazwany zbiór rozmyty: opakowanie na funkcję przynależności x -> μ(x).

    Zbiór jest wartością niezmienną. Operacje algebraiczne zwracają nowe
    zbiory, których funkcje domykają (closure) funkcje operandów, więc
    zbiór pochodny może przeżyć swoje operandy.

    Warunek wstępny: μ(x) w [0, 1]. Zbiór niczego nie przycina; wartości
    spoza zakresu przechodzą arytmetycznie przez union/intersection/complement.
    """
    name: str
    membership_function: Membership

    def membership_degree(self, x: Float) -> Float:
        return self.membership_function(x)

    def __call__(self, x: Float) -> Float:
        return self.membership_function(x)

    # ---------- algebra ----------

    def union(self, other: FuzzySet, snorm: str = "max") -> FuzzySet:
        op = norms.snorm(snorm)
        f, g = self.membership_function, other.membership_function

        def mu(x: Float) -> Float:
            return op(f(x), g(x))
        lo, hi = _hull(self.natural_domain(), other.natural_domain())
        return FuzzySet(f"Union({self.name}, {other.name})", _with_support(mu, lo, hi))

    def intersection(self, other: FuzzySet, tnorm: str = "min") -> FuzzySet:
        op = norms.tnorm(tnorm)
        f, g = self.membership_function, other.membership_function

        def mu(x: Float) -> Float:
            return op(f(x), g(x))
        lo, hi = _hull(self.natural_domain(), other.natural_domain())
        return FuzzySet(f"Intersection({self.name}, {other.name})", _with_support(mu, lo, hi))

    def complement(self) -> FuzzySet:
        f = self.membership_function

        def mu(x: Float) -> Float:
            return 1.0 - f(x)
        return FuzzySet(f"Complement({self.name})", _with_support(mu, *self.natural_domain()))

    def natural_domain(self) -> Tuple[Float, Float]:
        """support() funkcji przynależności (zbiory pochodne też ją mają); inaczej [0, 1]."""
        support = getattr(self.membership_function, "support", None)
        if callable(support):
            lo, hi = support()
            return float(lo), float(hi)
        return 0.0, 1.0

    def normalize(self, min_val: Optional[Float] = None, max_val: Optional[Float] = None,
                  step: Optional[Float] = None) -> FuzzySet:
        """
        Skaluje μ tak, by maksimum próbkowane na dziedzinie dawało 1.0.
        Maksimum <= 0 -> bez zmian (brak dzielenia przez zero).
        """
        lo, hi = self.natural_domain()
        lo = lo if min_val is None else min_val
        hi = hi if max_val is None else max_val
        if step is None:
            step = (hi - lo) / _NORMALIZE_STEPS or 1.0
        f = self.membership_function
        peak = peak_on_steps(lo, hi, step, f)
        if peak <= 0.0:
            return FuzzySet(f"Normalized({self.name})", f)

        def mu(x: Float) -> Float:
            return f(x) / peak
        return FuzzySet(f"Normalized({self.name})", _with_support(mu, *self.natural_domain()))

    # ---------- defuzyfikacja ----------

    def centroid(self, min_val: Float, max_val: Float, step: Float) -> Float:
        """
        Środek ciężkości Σ x·μ(x) / Σ μ(x) na punktach min_val, min_val+step, ... <= max_val.

        step <= 0 lub max_val < min_val -> SamplingError.
        Gdy μ jest zerowa we wszystkich punktach, wynikiem jest środek
        przedziału (min_val + max_val) / 2.
        """
        return centroid_on_steps(min_val, max_val, step, self.membership_function)

    def mean_of_maximum(self, min_val: Float, max_val: Float, step: Float) -> Float:
        return mom_on_steps(min_val, max_val, step, self.membership_function)

    def bisector(self, min_val: Float, max_val: Float, step: Float) -> Float:
        return bisector_on_steps(min_val, max_val, step, self.membership_function)
