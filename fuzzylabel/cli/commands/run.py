import json
from argparse import Namespace

import yaml

from .validate import cmd_validate
from .show import cmd_show
from .infer import cmd_infer
from .explain import cmd_explain
from .defuzz import cmd_defuzz
from .apply import cmd_apply

# kolejność wykonywania sekcji configu
_STEPS = (
    ("validate", cmd_validate),
    ("show", cmd_show),
    ("infer", cmd_infer),
    ("explain", cmd_explain),
    ("defuzz", cmd_defuzz),
    ("apply", cmd_apply),
)

def _ns(d: dict, rules) -> Namespace:
    d = dict(d or {})
    # wspólny plik reguł z sekcji 'project' jako fallback
    if "rules" not in d and rules:
        d["rules"] = rules
    if "rules" not in d:
        raise SystemExit("Brak 'rules' w sekcji configu (ani w 'project').")
    return Namespace(**d)

def _load_cfg(path: str):
    with open(path, encoding="utf-8") as f:
        if path.lower().endswith((".yml", ".yaml")):
            return yaml.safe_load(f) or {}
        return json.load(f)

def cmd_run(args):
    cfg = _load_cfg(args.config)
    if not isinstance(cfg, dict):
        raise SystemExit(f"Config {args.config}: oczekiwano mapy sekcji.")
    unknown = set(cfg) - {"project"} - {name for name, _ in _STEPS}
    if unknown:
        raise SystemExit(f"Nieznane sekcje configu: {', '.join(sorted(unknown))}")
    rules = (cfg.get("project") or {}).get("rules")

    for name, fn in _STEPS:
        if name in cfg:
            print(f"[run] {name}")
            fn(_ns(cfg[name], rules))
