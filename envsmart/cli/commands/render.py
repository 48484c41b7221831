"""Render command implementation."""

import logging
from argparse import Namespace

from envsmart.exceptions import ConfigError, ResolutionError
from envsmart.literal import env_literal
from envsmart.variables.renderer import TemplateRenderer
from .common import build_cache, build_config, setup_logging


logger = logging.getLogger(__name__)


def render_templates(args: Namespace) -> int:
    """
    Resolve each template argument and print the results, one per line.

    With --literal the arguments are raw literal tokens and a single quoted
    literal is printed.
    """
    try:
        config = build_config(args)
    except (ConfigError, FileNotFoundError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Configuration error: {e}")
        return 2

    setup_logging(args, config)
    logger.debug(f"Using source file: {config.source_file}")

    renderer = TemplateRenderer(cache=build_cache(config))

    try:
        if args.literal:
            print(env_literal(args.templates, renderer=renderer))
        else:
            for template in args.templates:
                print(renderer.resolve(template))
    except ResolutionError as e:
        logger.error(f"Resolution failed: {e}")
        return e.exit_code
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1

    return 0
