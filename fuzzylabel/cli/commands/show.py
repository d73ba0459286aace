import sys
from typing import List, Optional

from ...fuzzy.io.rule_parser import parse_rules


# ========= utils: ANSI / pretty =========

_RESET = "\x1b[0m"

def _use_ansi() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())

def _ansi_color(mu: float) -> str:
    """
    Kolor wg przynależności (μ):
      ≥ 0.50 → zielony
      ≥ 0.20 → żółty
      < 0.20 → szary
    """
    if not _use_ansi():
        return ""
    if mu >= 0.50:
        return "\x1b[32m"  # green
    if mu >= 0.20:
        return "\x1b[33m"  # yellow
    return "\x1b[90m"      # grey


# ========= main =========

def cmd_show(args) -> None:
    """
    Flagi:
      --rules PATH        : plik .fzr
      --at X              : punkt do policzenia μ zbiorów i stanu reguł (opcjonalnie)
      --include-inactive  : pokaż również reguły inactive
      --fired-only        : pokaż tylko reguły, które się odpaliły dla --at
    """
    rb = parse_rules(args.rules)

    at = getattr(args, "at", None)
    x: Optional[float] = None if at is None else float(at)
    include_inactive = bool(getattr(args, "include_inactive", False))
    fired_only = bool(getattr(args, "fired_only", False))

    # --- Sets ---
    print("Sets:")
    for name, fs in rb.sets.items():
        lo, hi = fs.natural_domain()
        line = f"  {name} {fs.membership_function!r} support=[{lo:g},{hi:g}]"
        if x is not None:
            mu = fs.membership_degree(x)
            color = _ansi_color(mu)
            reset = _RESET if color else ""
            line += f" -> {color}μ({x:g})={mu:.2f}{reset}"
        print(line)

    # --- Rules ---
    lo, hi, step = rb.domain
    print(f"Rules: default={rb.default_label}, domain=[{lo:g},{hi:g}] step={step:g}, defuzz={rb.defuzz}")

    shown: List[str] = []
    for i, (r, text) in enumerate(zip(rb.rules, rb.rule_texts), 1):
        if not include_inactive and not r.active:
            continue
        fired = None
        if x is not None:
            fired = r.evaluate(x) is not None
            if fired_only and not fired:
                continue

        suffix = ""
        if not r.active:
            suffix += " [inactive]"
        if fired:
            suffix += " [fired]"
        shown.append(f"  R{i}: IF {text} THEN {r.consequence.name} (w={r.weight:g}){suffix}")

    for line in shown:
        print(line)
    if not shown:
        print("  (brak reguł do wyświetlenia z tymi filtrami)")
