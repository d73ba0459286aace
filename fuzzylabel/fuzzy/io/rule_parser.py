"""
Gramatyka plików .fzr (skrót):
  input <name>                          # nazwa wejścia w warunkach (domyślnie x)
  set <name> (tri a b c | trap a b c d | gauss mu sigma | const v lo hi)
  rule IF <cond> (AND <cond>)* THEN <set> [weight w] [inactive]
      <cond> := <input> (>|>=|<|<=|==|!=) <number>
              | <input> in <set> [alpha]        # μ_set(x) >= alpha (domyślnie 0.5)
  default <label>                       # etykieta, gdy żadna reguła nie pasuje
  domain <min> <max> <step>             # siatka dla defuzyfikacji
  defuzz <centroid|mom|bisector>
  scale <label> <score> <threshold>     # opcjonalna skala priorytetów

Uwagi:
- Słowa kluczowe case-insensitive; nazwy zbiorów case-sensitive (cudzysłowy dla spacji).
- Operatory oddzielone spacjami: "x >= 0.9", nie "x>=0.9".
- Reguły walidowane PO wczytaniu całego pliku (zbiory mogą być zadeklarowane niżej).
"""

from __future__ import annotations
import logging
import operator
import shlex
from typing import Callable, List, Tuple

from ..core.defuzz import METHODS, check_sampling
from ..core.fuzzy_set import FuzzySet
from ..core.mfs import SHAPES
from ..core.rule import FuzzyRule
from ..core.types import Float, FuzzyError, Predicate, SamplingError
from ..model.knowledge import RuleBase

log = logging.getLogger(__name__)


class RuleFileError(FuzzyError):
    def __init__(self, msg: str, line: int, content: str):
        super().__init__(f"[.fzr:{line}] {msg}\n  >> {content}")
        self.line = line


_OPS = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    "!=": operator.ne,
}
_DEFAULT_ALPHA = 0.5

# warunek przed rozwiązaniem nazw zbiorów: ("cmp", op, value) | ("in", set_name, alpha)
Cond = Tuple[str, str, Float]


def _lex_line(raw: str) -> List[str]:
    """Tokenizuj linię: wspiera komentarze '#' i cudzysłowy."""
    lx = shlex.shlex(raw, posix=True)
    lx.whitespace_split = True
    lx.commenters = "#"
    return list(lx)


def _is_number(tok: str) -> bool:
    try:
        float(tok)
        return True
    except ValueError:
        return False


def _parse_conditions(words: List[str], input_name: str) -> List[Cond]:
    conds: List[Cond] = []
    i = 0
    while i < len(words):
        if words[i] != input_name:
            raise ValueError(f"Condition must start with input '{input_name}' (got '{words[i]}')")
        if i + 2 >= len(words):
            raise ValueError("Condition: expected '<input> <op> <value>' or '<input> in <set>'")
        op = words[i + 1].lower()
        if op == "in":
            set_name = words[i + 2]
            i += 3
            alpha = _DEFAULT_ALPHA
            if i < len(words) and _is_number(words[i]):
                alpha = float(words[i])
                i += 1
            conds.append(("in", set_name, alpha))
        elif op in _OPS:
            conds.append(("cmp", op, float(words[i + 2])))
            i += 3
        else:
            raise ValueError(f"Unknown operator '{words[i + 1]}' (allowed: {', '.join(_OPS)}, in)")
        if i < len(words):
            if words[i].lower() != "and":
                raise ValueError(f"Condition: expected AND or end, got '{words[i]}'")
            i += 1
            if i == len(words):
                raise ValueError("Condition: dangling AND")
    if not conds:
        raise ValueError("Rule has an empty condition")
    return conds


def _compile(conds: List[Cond], rb: RuleBase) -> Predicate:
    preds: List[Callable[[Float], bool]] = []
    for kind, arg, value in conds:
        if kind == "cmp":
            op = _OPS[arg]

            def pred(x: Float, op=op, value=value) -> bool:
                return op(x, value)
        else:
            fs = rb.sets[arg]

            def pred(x: Float, fs=fs, alpha=value) -> bool:
                return fs.membership_degree(x) >= alpha
        preds.append(pred)

    def condition(x: Float) -> bool:
        return all(p(x) for p in preds)
    return condition


def parse_rules(path: str) -> RuleBase:
    with open(path, "r", encoding="utf-8") as f:
        src = f.read()
    rb = parse_rules_string(src)
    log.debug("loaded %s: %d sets, %d rules", path, len(rb.sets), len(rb.rules))
    return rb


def parse_rules_string(source: str) -> RuleBase:
    rb = RuleBase()
    lines = source.splitlines()
    input_name = "x"

    pending_rules: List[Tuple[int, str, str, List[Cond], str, Float, bool]] = []

    for lineno, raw in enumerate(lines, 1):
        try:
            tokens = _lex_line(raw)
        except ValueError as e:
            raise RuleFileError(f"Cannot tokenize line: {e}", lineno, raw) from e
        if not tokens:
            continue
        head = tokens[0].lower()

        try:
            if head == "input":
                if len(tokens) != 2:
                    raise RuleFileError("input: expected 'input <name>'", lineno, raw)
                input_name = tokens[1]

            elif head == "set":
                if len(tokens) < 3:
                    raise RuleFileError("set: expected 'set <name> <shape> [params...]'", lineno, raw)
                name, shape = tokens[1], tokens[2].lower()
                if name in rb.sets:
                    raise RuleFileError(f"Duplicate set '{name}'", lineno, raw)
                if shape not in SHAPES:
                    raise RuleFileError(f"Unknown MF shape: {shape} (allowed: {', '.join(SHAPES)})", lineno, raw)
                cls, arity = SHAPES[shape]
                params = tokens[3:]
                if len(params) != arity:
                    raise RuleFileError(f"{shape}: expected {arity} parameters, got {len(params)}", lineno, raw)
                vals = [float(p) for p in params]
                if shape in ("tri", "trap") and vals != sorted(vals):
                    raise RuleFileError(f"{shape}: parameters must be non-decreasing", lineno, raw)
                if shape == "gauss" and vals[1] <= 0:
                    raise RuleFileError("gauss: sigma > 0 required", lineno, raw)
                rb.add_set(FuzzySet(name, cls(*vals)))

            elif head == "rule":
                words = tokens[1:]
                if not words or words[0].lower() != "if":
                    raise RuleFileError("Rule must start with IF", lineno, raw)
                try:
                    then_idx = next(i for i, t in enumerate(words) if t.lower() == "then")
                except StopIteration:
                    raise RuleFileError("Rule missing THEN", lineno, raw) from None

                conds = _parse_conditions(words[1:then_idx], input_name)

                # consequent: <set> [weight w] [inactive]
                cons = words[then_idx + 1:]
                if not cons:
                    raise RuleFileError("Consequent: expected a set name after THEN", lineno, raw)
                target = cons[0]
                weight = 1.0
                active = True
                i = 1
                while i < len(cons):
                    tok = cons[i].lower()
                    if tok == "weight":
                        if i + 1 >= len(cons):
                            raise RuleFileError("Consequent: expected 'weight <w>'", lineno, raw)
                        weight = float(cons[i + 1]); i += 2
                    elif tok == "inactive":
                        active = False; i += 1
                    else:
                        raise RuleFileError(f"Consequent: unknown option '{cons[i]}'", lineno, raw)
                pending_rules.append((lineno, raw, input_name, conds, target, weight, active))

            elif head == "default":
                if len(tokens) != 2:
                    raise RuleFileError("default: expected 'default <label>'", lineno, raw)
                rb.default_label = tokens[1]

            elif head == "domain":
                if len(tokens) != 4:
                    raise RuleFileError("domain: expected 'domain <min> <max> <step>'", lineno, raw)
                lo, hi, step = (float(t) for t in tokens[1:4])
                try:
                    check_sampling(lo, hi, step)
                except SamplingError as e:
                    raise RuleFileError(f"domain: {e}", lineno, raw) from e
                rb.domain = (lo, hi, step)

            elif head == "defuzz":
                if len(tokens) != 2 or tokens[1].lower() not in METHODS:
                    raise RuleFileError(f"defuzz: supported {' | '.join(METHODS)}", lineno, raw)
                rb.defuzz = tokens[1].lower()

            elif head == "scale":
                if len(tokens) != 4:
                    raise RuleFileError("scale: expected 'scale <label> <score> <threshold>'", lineno, raw)
                rb.scale_levels.append((tokens[1], float(tokens[2]), float(tokens[3])))

            else:
                raise RuleFileError(f"Unknown directive: {tokens[0]}", lineno, raw)

        except RuleFileError:
            raise
        except ValueError as e:
            # opakuj błąd w RuleFileError z kontekstem
            raise RuleFileError(str(e), lineno, raw) from e

    # Walidacja reguł i dopisanie do bazy
    for (rlineno, rraw, rinput, conds, target, w, active) in pending_rules:
        if target not in rb.sets:
            raise RuleFileError(f"Rule: unknown consequence set '{target}'", rlineno, rraw)
        for kind, arg, _v in conds:
            if kind == "in" and arg not in rb.sets:
                raise RuleFileError(f"Rule: unknown set '{arg}' in condition", rlineno, rraw)
        text = " AND ".join(
            f"{rinput} {arg} {v:g}" if kind == "cmp" else f"{rinput} in {arg} (>= {v:g})"
            for kind, arg, v in conds
        )
        rb.add_rule(FuzzyRule(_compile(conds, rb), rb.sets[target], weight=w, active=active), text)

    return rb
