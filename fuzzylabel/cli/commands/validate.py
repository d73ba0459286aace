from ...fuzzy.io.rule_parser import parse_rules

def cmd_validate(args):
    rb = parse_rules(args.rules)
    inactive = sum(1 for r in rb.rules if not r.active)
    print(f"OK: sets={len(rb.sets)}, rules={len(rb.rules)} (inactive={inactive})")
    lo, hi, step = rb.domain
    print(f"default={rb.default_label}, domain=[{lo:g},{hi:g}] step={step:g}, defuzz={rb.defuzz}")
    if rb.scale_levels:
        print("scale: " + ", ".join(f"{lab}={score:g}" for lab, score, _thr in rb.scale.levels))
