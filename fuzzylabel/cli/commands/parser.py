import argparse
from ..argtypes import parse_column, parse_float_list, DEFUZZ_CHOICES, LOG_LEVELS
# importy komend:
from .apply import cmd_apply
from .validate import cmd_validate
from .show import cmd_show
from .infer import cmd_infer
from .explain import cmd_explain
from .defuzz import cmd_defuzz
from .run import cmd_run

def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="fuzzylabel",
        description=("Rozmyte reguły ważone -> etykieta dla wejścia skalarnego "
                     "(validate/show → infer/explain → defuzz → apply)"),
        formatter_class=fmt,
        epilog=(
            "Przykłady:\n"
            "  fuzzylabel validate --rules tickets.fzr\n"
            "  fuzzylabel show --rules tickets.fzr --at 0.95 --fired-only\n"
            "  fuzzylabel infer --rules tickets.fzr 0.95 0.6 0.1\n"
            "  fuzzylabel infer --rules tickets.fzr --scored --values 0.95,0.6\n"
            "  fuzzylabel explain --rules tickets.fzr 0.95 --json\n"
            "  fuzzylabel defuzz --rules tickets.fzr --method mom --at 0.95\n"
            "  fuzzylabel apply --rules tickets.fzr --csv tickets.csv --col score --out labelled.csv\n"
            "  fuzzylabel run --config pipeline.yaml\n"
        )
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="logi DEBUG")
    ap.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")

    sub = ap.add_subparsers(dest="cmd", required=True)

    # validate
    sp_v = sub.add_parser("validate", help="Walidacja pliku reguł", formatter_class=fmt)
    sp_v.add_argument("--rules", required=True)
    sp_v.set_defaults(func=cmd_validate)

    # show
    sp_s = sub.add_parser("show", help="Pokaż zbiory i reguły; opcj. μ w punkcie", formatter_class=fmt)
    sp_s.add_argument("--rules", required=True)
    sp_s.add_argument("--at", type=float)
    sp_s.add_argument("--include-inactive", action="store_true", help="Pokaż również reguły inactive")
    sp_s.add_argument("--fired-only", action="store_true", help="Pokaż tylko reguły, które się odpaliły dla --at")
    sp_s.set_defaults(func=cmd_show)

    # infer
    sp_i = sub.add_parser("infer", help="Etykieta dla jednej lub wielu wartości", formatter_class=fmt)
    sp_i.add_argument("--rules", required=True)
    sp_i.add_argument("values", nargs="*", type=float)
    sp_i.add_argument("--values", dest="value_list", type=parse_float_list,
                      help="lista wartości oddzielonych przecinkami")
    sp_i.add_argument("--scored", action="store_true",
                      help="średnia ważona rang etykiet (skala z pliku lub domyślna skala priorytetów)")
    sp_i.set_defaults(func=cmd_infer)

    # explain
    sp_e = sub.add_parser("explain", help="Wyjaśnij wnioskowanie dla wartości", formatter_class=fmt)
    sp_e.add_argument("--rules", required=True)
    sp_e.add_argument("x", type=float)
    sp_e.add_argument("--json", action="store_true")
    sp_e.set_defaults(func=cmd_explain)

    # defuzz
    sp_d = sub.add_parser("defuzz", help="Wartość ostra z konsekwentów na dziedzinie pliku", formatter_class=fmt)
    sp_d.add_argument("--rules", required=True)
    sp_d.add_argument("--method", choices=DEFUZZ_CHOICES, help="gdy brak, używa 'defuzz' z pliku")
    sp_d.add_argument("--at", type=float, help="tylko reguły dopasowane do tej wartości")
    sp_d.set_defaults(func=cmd_defuzz)

    # apply
    sp_a = sub.add_parser("apply", help="Zastosuj reguły do kolumny CSV (batch)", formatter_class=fmt)
    g_io = sp_a.add_argument_group("Wejście/Wyjście")
    g_io.add_argument("--rules", required=True)
    g_io.add_argument("--csv", required=True)
    g_io.add_argument("--out", help="plik wyjściowy CSV (jeśli brak -> stdout)")
    sp_a.add_argument("--col", type=parse_column, default=0, help="kolumna wejścia (indeks lub nazwa)")
    sp_a.add_argument("--scored", action="store_true")
    sp_a.set_defaults(func=cmd_apply)

    # run
    sp_run = sub.add_parser("run", help="Uruchom pipeline z pliku konfiguracyjnego")
    sp_run.add_argument("--config", required=True, help="Ścieżka do pliku config.json / config.yaml")
    sp_run.set_defaults(func=cmd_run)

    return ap
