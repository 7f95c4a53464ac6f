"""CLI — пароль дня ARRIS/CommScope из командной строки.

Примеры:
    arris-potd                              # сегодня, default seed
    arris-potd -d 2021-12-25 -s 1122AABB
    arris-potd -r 2021-12-25 2022-01-05 -f json
    arris-potd -s ABCD --des                # DES-токен seed

Exit status: 0 при успехе, 2 при ошибке валидации (сообщение в stderr).
"""

import argparse
import json
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from src.core.domain.constants import DATE_FORMAT, DEFAULT_SEED
from src.core.domain.errors import PotdValidationError
from src.pipeline.generator import derive_password_of_the_day, derive_password_range, encode_seed


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arris-potd",
        description="Generate ARRIS/CommScope cable modem password of the day.",
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument(
        "-d", "--date",
        default=None,
        help="date in YYYY-MM-DD format (default: today)",
    )
    when.add_argument(
        "-r", "--range",
        nargs=2,
        metavar=("BEGIN", "END"),
        default=None,
        help="inclusive date range, at most 365 days",
    )
    parser.add_argument(
        "-s", "--seed",
        default=DEFAULT_SEED,
        help="seed, 4-8 characters (default: ARRIS default seed)",
    )
    parser.add_argument(
        "--des",
        action="store_true",
        help="print the DES-encrypted seed for the modem configuration file",
    )
    parser.add_argument(
        "-f", "--format",
        choices=("text", "json"),
        default="text",
        help="output format",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(args: argparse.Namespace) -> dict[str, str]:
    """Выполнение команды.

    Returns:
        Словарь для вывода: {дата: пароль} или {"des": токен}

    Raises:
        PotdValidationError: При ошибке валидации входных данных
    """
    if args.des:
        return {"des": encode_seed(args.seed).unwrap()}

    if args.range is not None:
        begin, end = args.range
        return derive_password_range(begin, end, args.seed).unwrap()

    day = args.date or date.today().strftime(DATE_FORMAT)
    potd = derive_password_of_the_day(day, args.seed).unwrap()
    return {potd.date: potd.password}


def render(output: dict[str, str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(output, indent=2)
    return "\n".join(f"{key}\t{value}" for key, value in output.items())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        output = run(args)
    except PotdValidationError as e:
        logger.debug("validation failed: %s", e.kind.value)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print(render(output, args.format))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
