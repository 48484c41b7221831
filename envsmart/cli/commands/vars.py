"""Vars command implementation."""

import json
import logging
from argparse import Namespace
from typing import Dict

import yaml

from envsmart.exceptions import ConfigError, ResolutionError
from .common import build_cache, build_config, setup_logging


logger = logging.getLogger(__name__)


def format_variables(variables: Dict[str, str], output_format: str) -> str:
    """Serialize a variable table as text (NAME=VALUE lines), JSON or YAML."""
    if output_format == 'json':
        return json.dumps(variables, indent=2, sort_keys=True)
    if output_format == 'yaml':
        return yaml.safe_dump(variables, default_flow_style=False, sort_keys=True).rstrip('\n')
    return '\n'.join(f"{name}={value}" for name, value in sorted(variables.items()))


def show_variables(args: Namespace) -> int:
    """Print the merged variable table, optionally limited to some names."""
    try:
        config = build_config(args)
    except (ConfigError, FileNotFoundError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Configuration error: {e}")
        return 2

    setup_logging(args, config)

    try:
        table = build_cache(config).get()
    except ResolutionError as e:
        logger.error(f"Failed to load variables: {e}")
        return e.exit_code

    if args.names:
        missing = [name for name in args.names if name not in table]
        if missing:
            logger.error(f"Undefined variables: {missing}")
            return 2
        variables = {name: table[name] for name in args.names}
    else:
        variables = dict(table)

    print(format_variables(variables, args.format))
    return 0
