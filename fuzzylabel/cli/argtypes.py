import argparse

from ..fuzzy.core.defuzz import METHODS

DEFUZZ_CHOICES = list(METHODS)
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

def parse_column(s: str):
    """'2' -> 2, 'score' -> 'score' (indeks lub nazwa kolumny)."""
    s = s.strip()
    if not s:
        raise argparse.ArgumentTypeError("Pusta nazwa kolumny.")
    return int(s) if s.isdigit() else s

def parse_float_list(s: str):
    """'0.1,0.5, 0.9' -> [0.1, 0.5, 0.9]."""
    if not s:
        return []
    out = []
    for tok in s.split(","):
        tok = tok.strip()
        if not tok:
            continue
        try:
            out.append(float(tok))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Niepoprawna liczba: '{tok}'.") from None
    return out
