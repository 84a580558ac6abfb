import argparse
import logging
import sys
from typing import List, Optional

import httpx

from jsonschemac.context import GeneratorContext
from jsonschemac.errors import SchemaError
from jsonschemac.golang_generator import GoGenerator
from jsonschemac.loader import load_schema
from jsonschemac.mock_generator import MockGenerator

GENERATORS = ("go", "model")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonschemac",
        description="Compile a JSON Schema document into types with required-field validation",
    )
    parser.add_argument("--file", default="schema.json", help="schema file or https URL to load")
    parser.add_argument("--package", default="main", help="name for the generated package")
    parser.add_argument("--generator", default="go", choices=GENERATORS, help="generator to use")
    parser.add_argument("--samples", metavar="DIR", help="also write a sample JSON instance per type into DIR")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def run(args: argparse.Namespace) -> str:
    ctx = GeneratorContext.from_source(load_schema(args.file), package=args.package)

    if args.generator == "go":
        src = GoGenerator.package_src(ctx)
    else:
        src = ctx.model.model_dump_json(indent=2)

    if args.samples:
        MockGenerator.generate(ctx, [args.samples])

    return src


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        src = run(args)
    except (SchemaError, OSError, httpx.HTTPError) as e:
        print(f"jsonschemac: {e}", file=sys.stderr)
        return 1

    print(src)
    return 0


if __name__ == "__main__":
    sys.exit(main())
