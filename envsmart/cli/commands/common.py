"""Setup shared by the CLI commands."""

import logging
from argparse import Namespace

from envsmart.config import EnvSmartConfig, load_config
from envsmart.sources.cache import VariableCache
from envsmart.sources.loader import VariableSourceLoader


def build_config(args: Namespace) -> EnvSmartConfig:
    """Load configuration with the command-line flags applied on top."""
    return load_config(
        config_path=args.config,
        overrides={
            'source_file': args.source_file,
            'log_level': args.log_level,
        }
    )


def setup_logging(args: Namespace, config: EnvSmartConfig) -> None:
    level_name = 'warning' if config.log_level == 'warn' else config.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_cache(config: EnvSmartConfig) -> VariableCache:
    """Cache bound to the configured source file for this invocation."""
    return VariableCache(VariableSourceLoader(config.source_file).load)
