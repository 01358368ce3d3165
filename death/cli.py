"""
death Command Line Interface (CLI)
==================================

The terminal program you run like:

    death --name "Ann" --birthday 15/05/1990
    python -m death.cli -b 1990-05-15 -d reasons.txt --json

It demonstrates:
- Argument parsing (argparse)
- Asking for missing inputs when run from a terminal
- Mapping the inputs onto the predictor and printing the result

Exit codes: 0 on success, 1 on invalid input, 2 on bad command-line usage.
"""

from __future__ import annotations
from typing import List, Optional
import argparse, json, logging, random, sys

from . import __version__
from .date import Date
from .errors import DeathError, InvalidDateError
from .loader import load_death_reasons
from .models import Prediction, User
from .predictor import Predictor, PredictorConfig, default_rng

log = logging.getLogger(__name__)

# used when no birthday is given and we cannot ask for one
DEFAULT_BIRTHDAY = "01/01/1970"

MAX_LIFESPAN = 150


def _lifespan(value: str) -> int:
    try:
        years = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number of years: {value!r}")
    if not 1 <= years <= MAX_LIFESPAN:
        raise argparse.ArgumentTypeError(f"lifespan must be between 1 and {MAX_LIFESPAN} years")
    return years


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="death", description="A program that predicts your death date")
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-n", "--name", help="Your name")
    ap.add_argument("-b", "--birthday", help="Your birthday (DD/MM/YYYY or YYYY-MM-DD)")
    ap.add_argument("-d", "--death-reasons", metavar="FILE",
                    help="Custom death reasons file (.txt one per line, or .csv/.xlsx)")
    ap.add_argument("-l", "--lifespan", type=_lifespan, metavar="YEARS",
                    help="Use this lifespan instead of a random one")
    ap.add_argument("--deterministic", action="store_true",
                    help="No random noise on the date (same input, same date)")
    ap.add_argument("--skewed", action="store_true",
                    help="Favour short remaining lifespans when the lifespan is random")
    ap.add_argument("--seed", type=int, help="Seed for the random generator")
    ap.add_argument("--require-reasons", action="store_true",
                    help="Fail if the death reasons file cannot be read")
    ap.add_argument("--json", action="store_true", help="Print the prediction as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _interactive() -> bool:
    return sys.stdin.isatty()


def ask_name() -> str:
    try:
        return input("Your name: ").strip()
    except EOFError:
        return ""


def ask_birthday() -> Date:
    """Keep asking until the user types a valid date."""
    while True:
        try:
            line = input("Your birthday (DD/MM/YYYY): ")
        except EOFError:
            raise InvalidDateError("No birthday given")
        try:
            return Date.parse(line)
        except InvalidDateError as e:
            print(f"Error: {e}")


def print_prediction(p: Prediction) -> None:
    if p.name:
        print(f"{p.name}, here is your fate.")
        print()
    print("DATE OF DEATH")
    print(p.death_date.long_format())
    print(f"Be aware of: {p.reason}")


def run(args: argparse.Namespace) -> int:
    """Run one prediction for parsed arguments. Raises DeathError on bad input."""
    name = args.name
    if name is None and _interactive():
        name = ask_name()

    if args.birthday is not None:
        birthday = Date.parse(args.birthday)
    elif _interactive():
        birthday = ask_birthday()
    else:
        birthday = Date.parse(DEFAULT_BIRTHDAY)

    today = Date.today()
    if birthday > today:
        raise InvalidDateError(f"Birthday {birthday} is in the future", kind="day")

    reasons = load_death_reasons(args.death_reasons, strict=args.require_reasons)
    rng = random.Random(args.seed) if args.seed is not None else default_rng()
    predictor = Predictor(config=PredictorConfig(skewed=args.skewed), rng=rng)

    user = User(name=name or "", birthday=birthday, lifespan_years=args.lifespan, death_reasons=reasons)
    log.debug("predicting for %r born %s", user.name, user.birthday)
    p = predictor.predict(user, today=today, deterministic=args.deterministic)

    if args.json:
        print(json.dumps(p.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_prediction(p)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the death CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return run(args)
    except DeathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
