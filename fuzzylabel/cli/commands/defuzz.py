from ...fuzzy.io.rule_parser import parse_rules

def cmd_defuzz(args):
    rb = parse_rules(args.rules)
    engine = rb.build_engine()
    method = getattr(args, "method", None) or rb.defuzz
    at = getattr(args, "at", None)
    x = None if at is None else float(at)
    lo, hi, step = rb.domain
    y = engine.defuzzify(lo, hi, step, method=method, x=x)
    where = "all rules" if x is None else f"x={x:g}"
    print(f"{method} ({where}): {y:.6g}")
