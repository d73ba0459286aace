import csv
import sys
from typing import List, Union

from ...fuzzy.io.rule_parser import parse_rules
from ...fuzzy.model.priority import TICKET_PRIORITY

def _is_float_cell(s: str) -> bool:
    try:
        float(s); return True
    except ValueError:
        return False

def _resolve_column(spec: Union[int, str], colnames: List[str]) -> int:
    if isinstance(spec, int):
        if not 0 <= spec < len(colnames):
            raise SystemExit(f"Kolumna [{spec}] poza zakresem (kolumn: {len(colnames)}).")
        return spec
    if spec.isdigit():
        return _resolve_column(int(spec), colnames)
    try:
        return colnames.index(spec)
    except ValueError:
        raise SystemExit(f"Kolumna '{spec}' nie istnieje w CSV (kolumny: {colnames}).") from None

def cmd_apply(args):
    """
    Zastosuj reguły (batch) do kolumny CSV z wartością wejściową.
    Dopisuje kolumny: _label oraz _w_<label> (suma wag per etykieta).
    Puste komórki -> pusta etykieta.
    """
    rb = parse_rules(args.rules)
    engine = rb.build_engine()
    scored = bool(getattr(args, "scored", False))
    scale = (rb.scale or TICKET_PRIORITY) if scored else None
    labels = list(dict.fromkeys(r.consequence.name for r in rb.rules))

    out_path = getattr(args, "out", None)
    n_rows = 0

    with open(args.csv, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    if not rows:
        raise SystemExit("Pusty plik CSV.")

    # --- wykrycie nagłówka ---
    first = rows[0]
    header_mode = any(not _is_float_cell(c) for c in first)
    if header_mode:
        colnames = [c.strip() for c in first]
        data = rows[1:]
    else:
        colnames = [f"c{i}" for i in range(len(first))]
        data = rows
    col = _resolve_column(getattr(args, "col", 0), colnames)

    out_f = open(out_path, "w", newline="", encoding="utf-8") if out_path else sys.stdout
    try:
        writer = csv.writer(out_f)
        writer.writerow(colnames + ["_label"] + [f"_w_{lab}" for lab in labels])
        first_data_line = 2 if header_mode else 1
        for lineno, row in enumerate(data, first_data_line):
            if not row:
                continue
            cell = row[col].strip() if col < len(row) else ""
            if cell == "":
                writer.writerow(row + [""] + ["" for _ in labels])
                continue
            if not _is_float_cell(cell):
                raise SystemExit(f"Wiersz {lineno}, kolumna [{col}] {colnames[col]}: "
                                 f"'{cell}' nie jest liczbą.")
            x = float(cell)
            strengths = engine.strengths(x)
            label = engine.infer_scored(x, scale) if scored else engine.infer(x)
            writer.writerow(row + [label] + [f"{strengths.get(lab, 0.0):g}" for lab in labels])
            n_rows += 1
    finally:
        if out_path:
            out_f.close()

    if out_path:
        print(f"[apply] {n_rows} wierszy zapisane do {out_path}")
