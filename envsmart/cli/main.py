"""Main CLI entry point for envsmart."""

import argparse
import sys
from typing import Optional

from .commands import render_templates, show_variables


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--source-file',
        type=str,
        help='Path to the NAME=VALUE source file (default: .env)'
    )
    parser.add_argument(
        '--config',
        type=str,
        help='Path to an envsmart YAML config file'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the envsmart CLI."""
    parser = argparse.ArgumentParser(
        prog='envsmart',
        description='Resolve {NAME} templates against .env and the environment'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    render_parser = subparsers.add_parser('render', help='Resolve templates')
    render_parser.add_argument(
        'templates',
        nargs='+',
        metavar='TEMPLATE',
        help='Template to resolve (a bare NAME reads the environment)'
    )
    render_parser.add_argument(
        '--literal',
        action='store_true',
        help='Treat arguments as quoted literal tokens and print a quoted literal'
    )
    _add_common_arguments(render_parser)

    vars_parser = subparsers.add_parser('vars', help='Show the merged variable table')
    vars_parser.add_argument(
        'names',
        nargs='*',
        metavar='NAME',
        help='Only show these variables'
    )
    vars_parser.add_argument(
        '--format',
        choices=['text', 'json', 'yaml'],
        default='text',
        help='Output format'
    )
    _add_common_arguments(vars_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'render':
        return render_templates(parsed_args)
    elif parsed_args.command == 'vars':
        return show_variables(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
