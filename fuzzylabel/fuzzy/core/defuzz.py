import math
from typing import List, Tuple
from .types import Float, Membership, SamplingError

# tolerancja (w krokach) przy domykaniu przedziału [min_val, max_val]
_EDGE_TOL = 1e-9

def check_sampling(min_val: Float, max_val: Float, step: Float) -> None:
    if not all(math.isfinite(v) for v in (min_val, max_val, step)):
        raise SamplingError(f"Sampling bounds must be finite (min={min_val}, max={max_val}, step={step})")
    if step <= 0.0:
        raise SamplingError(f"Sampling step must be > 0 (got {step})")
    if max_val < min_val:
        raise SamplingError(f"Sampling range is empty: max ({max_val}) < min ({min_val})")


def sample_points(min_val: Float, max_val: Float, step: Float) -> List[Float]:
    """
    Punkty x_i = min_val + i*step, i = 0, 1, ... dopóki x_i <= max_val.
    Liczone z indeksu (nie przez akumulację), więc prawy koniec nie ginie
    przez błąd zaokrągleń.
    """
    check_sampling(min_val, max_val, step)
    n = int(math.floor((max_val - min_val) / step + _EDGE_TOL)) + 1
    return [min_val + i * step for i in range(n)]

def _sampled(min_val: Float, max_val: Float, step: Float, mu: Membership) -> Tuple[List[Float], List[Float]]:
    xs = sample_points(min_val, max_val, step)
    return xs, [mu(x) for x in xs]

def peak_on_steps(min_val: Float, max_val: Float, step: Float, mu: Membership) -> Float:
    _xs, ws = _sampled(min_val, max_val, step, mu)
    return max(ws)

def centroid_on_steps(min_val: Float, max_val: Float, step: Float, mu: Membership) -> Float:
    """Σ x·μ(x) / Σ μ(x); przy zerowym mianowniku zwraca środek przedziału."""
    xs, ws = _sampled(min_val, max_val, step, mu)
    num = 0.0
    den = 0.0
    for x, w in zip(xs, ws):
        num += x * w
        den += w
    return num / den if den != 0.0 else (min_val + max_val) / 2.0

def mom_on_steps(min_val: Float, max_val: Float, step: Float, mu: Membership) -> Float:
    xs, ws = _sampled(min_val, max_val, step, mu)
    m = max(ws)
    if m <= 0.0:
        return (min_val + max_val) / 2.0
    # tolerancja numeryczna
    tol = max(1e-12, 1e-6 * m)
    tops = [x for x, w in zip(xs, ws) if abs(w - m) <= tol]
    return sum(tops) / len(tops)

def bisector_on_steps(min_val: Float, max_val: Float, step: Float, mu: Membership) -> Float:
    xs, ws = _sampled(min_val, max_val, step, mu)
    total = sum(w * step for w in ws)
    if total <= 0.0:
        return (min_val + max_val) / 2.0
    half = total / 2.0
    acc = 0.0
    for x, w in zip(xs, ws):
        acc += w * step
        if acc >= half:
            return x
    return xs[-1]

METHODS = {
    "centroid": centroid_on_steps,
    "mom": mom_on_steps,
    "bisector": bisector_on_steps,
}
