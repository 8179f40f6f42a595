#!/usr/bin/env python3
"""
Command-line interface for typedecl - check and render declared types.
"""

import argparse
import json
import sys


def _load_parser(args):
    from .classpath import MappingClassPath
    from .parser import DeclarationParser

    classpath = None
    if args.classes:
        classpath = MappingClassPath.from_json(args.classes)
        if args.verbose:
            print(f"Loaded {len(classpath)} class(es) from {args.classes}", file=sys.stderr)
    return DeclarationParser(classpath=classpath)


def check_command(args):
    """Check whether a candidate type is assignable to a target type."""
    parser = _load_parser(args)
    target = parser.parse(args.target)
    candidate = parser.parse(args.candidate)

    if args.verbose:
        print(f"target:    {target.as_string()}", file=sys.stderr)
        print(f"candidate: {candidate.as_string()}", file=sys.stderr)

    if target.is_assignable(candidate):
        print(f"{candidate.as_string()} is assignable to {target.as_string()}")
        return 0
    print(f"{candidate.as_string()} is not assignable to {target.as_string()}")
    return 1


def render_command(args):
    """Render declarations in canonical form."""
    parser = _load_parser(args)

    for declaration in args.declarations:
        parsed = parser.parse(declaration)
        if args.json:
            print(json.dumps(parsed.to_dict(), indent=2))
        elif args.return_type:
            print(parsed.as_return_type_declaration())
        else:
            print(parsed.as_string())
    return 0


def _add_common_arguments(subparser):
    subparser.add_argument(
        "--classes",
        help="JSON file declaring the classes object types may name "
             "(default: resolve names against importable Python modules)",
    )
    subparser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print parsed types to stderr",
    )


def main(argv=None):
    """Main entry point for the typedecl CLI."""
    from .errors import TypeDeclError

    parser = argparse.ArgumentParser(
        prog="typedecl",
        description="Check assignability between declared types and render them",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check whether CANDIDATE is assignable to TARGET",
    )
    check_parser.add_argument("target", help="Declared target type, e.g. '?iterable'")
    check_parser.add_argument("candidate", help="Candidate type, e.g. 'array'")
    _add_common_arguments(check_parser)
    check_parser.set_defaults(func=check_command)

    # Render command
    render_parser = subparsers.add_parser(
        "render",
        help="Print declarations in canonical form",
    )
    render_parser.add_argument(
        "declarations",
        nargs="+",
        help="Type declarations to render",
    )
    render_parser.add_argument(
        "--return-type",
        action="store_true",
        help="Render as a return type declaration (': T')",
    )
    render_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON description of each type",
    )
    _add_common_arguments(render_parser)
    render_parser.set_defaults(func=render_command)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    try:
        code = args.func(args)
    except (TypeDeclError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    sys.exit(code)


if __name__ == "__main__":
    main()
