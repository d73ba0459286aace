from ...fuzzy.io.rule_parser import parse_rules
from ...fuzzy.model.priority import TICKET_PRIORITY

def _collect_values(args):
    vals = [float(v) for v in (getattr(args, "values", None) or [])]
    vals += [float(v) for v in (getattr(args, "value_list", None) or [])]
    if not vals:
        raise SystemExit("Podaj co najmniej jedną wartość wejściową (pozycyjnie lub --values).")
    return vals

def cmd_infer(args):
    rb = parse_rules(args.rules)
    engine = rb.build_engine()
    scored = bool(getattr(args, "scored", False))
    scale = (rb.scale or TICKET_PRIORITY) if scored else None
    for x in _collect_values(args):
        label = engine.infer_scored(x, scale) if scored else engine.infer(x)
        print(f"{x:g}: {label}")
