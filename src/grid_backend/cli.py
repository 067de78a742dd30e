from __future__ import annotations

import argparse
import json
import sys

from .errors import DecodeError, InvalidChangeset
from .field_types import FieldType
from .logging_config import configure_logging
from .type_options import get_url_type_option
from .url_normalization import extract_url


def cmd_normalize(args: argparse.Namespace) -> None:
    """
    Print the normalized URL found in TEXT (an empty line when there is none).
    """
    print(extract_url(args.text))


def cmd_apply_changeset(args: argparse.Namespace) -> None:
    """
    Apply TEXT as a URL cell edit and print the data to persist.
    """
    try:
        data = get_url_type_option().apply_changeset(args.text)
    except InvalidChangeset as exc:
        print(f"ERROR: invalid changeset: {exc}", file=sys.stderr)
        sys.exit(1)
    print(data)


def cmd_decode(args: argparse.Namespace) -> None:
    """
    Decode stored URL cell data as the transport JSON or, with --as-str, as
    the plain display text.
    """
    try:
        field_type = FieldType.parse(args.field_type)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    type_option = get_url_type_option()
    try:
        if args.as_str:
            print(type_option.decode_cell_data_to_str(args.data, field_type))
            return
        cell = type_option.try_decode_cell_data(args.data, field_type)
    except DecodeError as exc:
        print(f"ERROR: could not decode cell data: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(cell.model_dump(), ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-backend",
        description="Grid backend utilities for URL cells.",
    )
    subparsers = parser.add_subparsers(dest="command")

    p_normalize = subparsers.add_parser(
        "normalize",
        help="Extract and normalize the first URL in a piece of text.",
    )
    p_normalize.add_argument("text", help="Free text to scan.")
    p_normalize.set_defaults(func=cmd_normalize)

    p_apply = subparsers.add_parser(
        "apply-changeset",
        help="Apply an edit to a URL cell and print the stored JSON.",
    )
    p_apply.add_argument("text", help="New raw cell content.")
    p_apply.set_defaults(func=cmd_apply_changeset)

    p_decode = subparsers.add_parser(
        "decode",
        help="Decode stored URL cell data.",
    )
    p_decode.add_argument("data", help="Stored cell JSON.")
    p_decode.add_argument(
        "--field-type",
        default=FieldType.URL.value,
        help="Field type the cell is being read as (default: URL).",
    )
    p_decode.add_argument(
        "--as-str",
        action="store_true",
        default=False,
        help="Print the raw cell text instead of the transport JSON.",
    )
    p_decode.set_defaults(func=cmd_decode)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main()
