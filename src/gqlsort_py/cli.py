"""gqlsort: sort GraphQL schemas into a canonical, diff-stable order.

Usage:
    gqlsort --input FILE [--output FILE] [--to sdl|json]
    gqlsort --input-dir DIR --output-dir DIR [--to sdl|json]
    gqlsort --input FILE --check         # exit 1 unless already sorted
    gqlsort --input FILE --fingerprint   # print the order-insensitive SHA-256

Files ending in .json are read as introspection results, anything else as SDL
(override with --from). Without comparison flags names are ordered by code
point; any of --locale, --sensitivity, --numeric, --case-first or
--ignore-punctuation switches to Unicode collation.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from graphql import GraphQLError, GraphQLSchema

from gqlsort_py.converter.lexicographic_sort import lexicographic_sort_schema
from gqlsort_py.converter.sort_check import is_lexicographically_sorted
from gqlsort_py.errors import SchemaSortError
from gqlsort_py.parser.introspection_parser import parse_introspection_file
from gqlsort_py.parser.sdl_parser import parse_sdl_file
from gqlsort_py.schema.options import CASE_FIRST_VALUES, SENSITIVITIES, CompareOptions
from gqlsort_py.serializer.fingerprint import compute_schema_fingerprint
from gqlsort_py.serializer.json_serializer import serialize_json
from gqlsort_py.serializer.sdl_serializer import serialize_sdl

logger = logging.getLogger(__name__)

SDL_EXTENSIONS = (".graphql", ".graphqls", ".gql")
JSON_EXTENSION = ".json"
OUTPUT_EXTENSIONS = {"sdl": ".graphql", "json": ".json"}


def detect_format(path: str) -> str:
    """Guess the input format of ``path`` from its extension."""
    return "introspection" if path.lower().endswith(JSON_EXTENSION) else "sdl"


def load_schema(path: str, input_format: Optional[str] = None) -> GraphQLSchema:
    """Read a schema from an SDL or introspection JSON file."""
    input_format = input_format or detect_format(path)
    logger.debug("Loading %s as %s", path, input_format)
    if input_format == "introspection":
        return parse_introspection_file(path)
    if input_format == "sdl":
        return parse_sdl_file(path)
    raise ValueError(f"Unknown input format: {input_format!r}")


def convert_file(
    input_path: str,
    output_path: Optional[str] = None,
    output_format: str = "sdl",
    input_format: Optional[str] = None,
    compare_options: Optional[CompareOptions] = None,
) -> str:
    """Sort a single schema file.

    Args:
        input_path: Path to the input file.
        output_path: Optional output file path. If None, nothing is written.
        output_format: 'sdl' or 'json'.
        input_format: 'sdl' or 'introspection'; detected from the extension
            when None.
        compare_options: Name comparison options.

    Returns:
        The sorted schema, serialized.
    """
    schema = lexicographic_sort_schema(load_schema(input_path, input_format), compare_options)

    if output_format == "sdl":
        result = serialize_sdl(schema)
    elif output_format == "json":
        result = serialize_json(schema)
    else:
        raise ValueError(f"Unknown output format: {output_format!r}")

    if output_path:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result)
        logger.debug("Wrote %s", output_path)

    return result


def convert_batch(
    input_dir: str,
    output_dir: str,
    output_format: str = "sdl",
    compare_options: Optional[CompareOptions] = None,
) -> tuple[int, int]:
    """Sort all schema files in a directory.

    Returns:
        (success_count, failure_count)
    """
    os.makedirs(output_dir, exist_ok=True)
    ext_out = OUTPUT_EXTENSIONS[output_format]

    ok = 0
    fail = 0

    for filename in sorted(os.listdir(input_dir)):
        if not filename.lower().endswith(SDL_EXTENSIONS + (JSON_EXTENSION,)):
            continue

        input_path = os.path.join(input_dir, filename)
        output_name = os.path.splitext(filename)[0] + ext_out
        output_path = os.path.join(output_dir, output_name)

        try:
            convert_file(
                input_path,
                output_path,
                output_format=output_format,
                compare_options=compare_options,
            )
            print(f"  OK  {filename} -> {output_name}")
            ok += 1
        except Exception as e:
            print(f"  FAIL {filename}: {e}")
            logger.debug("Failed to sort %s", input_path, exc_info=True)
            fail += 1

    return ok, fail


def compare_options_from_args(args: argparse.Namespace) -> Optional[CompareOptions]:
    """Build CompareOptions from the comparison flags, or None if none were given."""
    options: dict = {}
    if args.sensitivity:
        options["sensitivity"] = args.sensitivity
    if args.numeric:
        options["numeric"] = True
    if args.case_first:
        options["caseFirst"] = args.case_first
    if args.ignore_punctuation:
        options["ignorePunctuation"] = True

    if not options and not args.locale:
        return None
    return CompareOptions(locales=args.locale or None, options=options)


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gqlsort",
        description="Sort GraphQL schemas lexicographically",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--input", "-i",
        help="Input schema file (SDL or introspection JSON)",
    )
    parser.add_argument(
        "--output", "-o",
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--input-dir",
        help="Input directory for batch sorting",
    )
    parser.add_argument(
        "--output-dir",
        help="Output directory for batch sorting",
    )
    parser.add_argument(
        "--from",
        dest="input_format",
        choices=["sdl", "introspection"],
        help="Input format (default: from file extension)",
    )
    parser.add_argument(
        "--to",
        dest="output_format",
        choices=["sdl", "json"],
        default="sdl",
        help="Output format (default: sdl)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the input is not already sorted",
    )
    parser.add_argument(
        "--fingerprint",
        action="store_true",
        help="Print the SHA-256 fingerprint of the sorted schema",
    )

    compare = parser.add_argument_group("comparison")
    compare.add_argument(
        "--locale",
        action="append",
        help="BCP 47 locale tag; may be repeated",
    )
    compare.add_argument("--sensitivity", choices=SENSITIVITIES)
    compare.add_argument("--numeric", action="store_true", help="Compare digit runs by value")
    compare.add_argument("--case-first", choices=CASE_FIRST_VALUES)
    compare.add_argument("--ignore-punctuation", action="store_true")

    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings")
    return parser


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    compare_options = compare_options_from_args(args)

    if args.input_dir and args.output_dir:
        ok, fail = convert_batch(
            args.input_dir, args.output_dir, args.output_format, compare_options
        )
        print(f"\nSorted {ok} files, {fail} failed")
        return 1 if fail else 0

    if not args.input:
        parser.print_help()
        return 1

    if args.check:
        schema = load_schema(args.input, args.input_format)
        if is_lexicographically_sorted(schema, compare_options):
            logger.info("%s is sorted", args.input)
            return 0
        logger.warning("%s is not sorted", args.input)
        return 1

    if args.fingerprint:
        schema = load_schema(args.input, args.input_format)
        print(compute_schema_fingerprint(schema, compare_options))
        return 0

    result = convert_file(
        args.input,
        args.output,
        output_format=args.output_format,
        input_format=args.input_format,
        compare_options=compare_options,
    )
    if not args.output:
        sys.stdout.write(result)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        return _run(args, parser)
    except (SchemaSortError, GraphQLError, OSError, ValueError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
