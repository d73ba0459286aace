import json
from ...fuzzy.io.rule_parser import parse_rules

def cmd_explain(args):
    rb = parse_rules(args.rules)
    engine = rb.build_engine()
    res = engine.explain(float(args.x))
    if getattr(args, "json", False):
        print(json.dumps(res, indent=2))
        return
    print(f"Input: {res['input']:g}")
    for row, text in zip(res["rules"], rb.rule_texts):
        mark = "fired" if row["fired"] else ("inactive" if not row["active"] else "-")
        print(f"  R{row['rule_index'] + 1}: IF {text} THEN {row['label']}  weight={row['weight']:g}  [{mark}]")
    if res["strengths"]:
        print("Strengths: " + ", ".join(f"{lab}={w:g}" for lab, w in res["strengths"].items()))
    print(f"Chosen: {res['chosen']}")
