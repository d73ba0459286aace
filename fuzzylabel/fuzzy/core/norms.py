from functools import reduce
from typing import Callable, Dict, Iterable
from .types import Float, FuzzyError

Pair = Callable[[Float, Float], Float]

# --- T-normy (pary) ---
def t_min(a: Float, b: Float) -> Float:
    return a if a <= b else b

def t_prod(a: Float, b: Float) -> Float:
    return a * b

def t_lukasiewicz(a: Float, b: Float) -> Float:
    return max(0.0, a + b - 1.0)

def t_hamacher(a: Float, b: Float) -> Float:
    denom = a + b - a * b
    if denom == 0.0:  # (0,0) -> 0
        return 0.0
    return (a * b) / denom

# --- S-normy (pary) ---
def s_max(a: Float, b: Float) -> Float:
    return a if a >= b else b

def s_prob(a: Float, b: Float) -> Float:
    return a + b - a * b  # algebraic sum

def s_bsum(a: Float, b: Float) -> Float:
    return min(1.0, a + b)  # bounded sum

def s_hamacher(a: Float, b: Float) -> Float:
    denom = 1.0 - a * b
    if denom == 0.0:
        return 1.0
    return (a + b - 2.0 * a * b) / denom

TNORMS: Dict[str, Pair] = {
    "min": t_min,
    "prod": t_prod,
    "lukasiewicz": t_lukasiewicz,
    "hamacher": t_hamacher,
}
SNORMS: Dict[str, Pair] = {
    "max": s_max,
    "prob": s_prob,
    "sum": s_prob,
    "bsum": s_bsum,
    "lukasiewicz": s_bsum,
    "hamacher": s_hamacher,
}

def tnorm(name: str) -> Pair:
    try:
        return TNORMS[name.lower()]
    except KeyError:
        raise FuzzyError(f"Unknown t-norm '{name}' (allowed: {', '.join(TNORMS)})") from None

def snorm(name: str) -> Pair:
    try:
        return SNORMS[name.lower()]
    except KeyError:
        raise FuzzyError(f"Unknown s-norm '{name}' (allowed: {', '.join(SNORMS)})") from None

def fold(op: Pair, vals: Iterable[Float], neutral: Float) -> Float:
    """Zwiń ciąg wartości normą; pusty ciąg -> element neutralny."""
    return reduce(op, (float(v) for v in vals), neutral)
