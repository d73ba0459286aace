import sys
import logging

from .commands.parser import build_parser
from ..fuzzy.core.types import FuzzyError
from ..logsetup import setup_logging

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else getattr(logging, args.log_level)
    setup_logging(level)
    try:
        args.func(args)
    except FuzzyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
