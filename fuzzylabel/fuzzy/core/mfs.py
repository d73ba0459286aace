from __future__ import annotations
import math
from dataclasses import dataclass
from .types import Float

class MembershipFunction:
    """Kształt MF: wywoływalny (x -> μ), z naturalną dziedziną w support()."""
    def mu(self, x: Float) -> Float:
        raise NotImplementedError
    def support(self) -> tuple[Float, Float]:
        raise NotImplementedError
    def __call__(self, x: Float) -> Float:
        return self.mu(x)

@dataclass(frozen=True)
class Triangular(MembershipFunction):
    a: Float; b: Float; c: Float
    def mu(self, x: Float) -> Float:
        if x < self.a or x > self.c: return 0.0
        if x == self.b: return 1.0
        if x < self.b:  return (x - self.a) / (self.b - self.a or 1e-12)
        return (self.c - x) / (self.c - self.b or 1e-12)
    def support(self) -> tuple[Float, Float]:
        return (self.a, self.c)

@dataclass(frozen=True)
class Trapezoidal(MembershipFunction):
    a: Float; b: Float; c: Float; d: Float
    def mu(self, x: Float) -> Float:
        if x < self.a or x > self.d: return 0.0
        if self.b <= x <= self.c: return 1.0
        if x < self.b: return (x - self.a) / (self.b - self.a or 1e-12)
        return (self.d - x) / (self.d - self.c or 1e-12)
    def support(self) -> tuple[Float, Float]:
        return (self.a, self.d)

@dataclass(frozen=True)
class Gaussian(MembershipFunction):
    mu0: Float; sigma: Float
    def mu(self, x: Float) -> Float:
        z = (x - self.mu0) / (self.sigma or 1e-12)
        return math.exp(-0.5 * z * z)
    def support(self) -> tuple[Float, Float]:
        s = 4.0 * self.sigma
        return (self.mu0 - s, self.mu0 + s)

@dataclass(frozen=True)
class Constant(MembershipFunction):
    value: Float; lo: Float = 0.0; hi: Float = 1.0
    def mu(self, x: Float) -> Float:
        return self.value
    def support(self) -> tuple[Float, Float]:
        return (self.lo, self.hi)

SHAPES = {
    "tri": (Triangular, 3),
    "trap": (Trapezoidal, 4),
    "gauss": (Gaussian, 2),
    "const": (Constant, 3),
}
