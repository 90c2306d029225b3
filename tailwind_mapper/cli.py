#!/usr/bin/env python3
"""
Command-line interface for Tailwind Mapper.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.formatter import OUTPUT_MODES
from .core.version import SUPPORTED_VERSIONS
from .services import ServiceRegistry
from .tools import ToolDispatcher
from .utils.config import MAX_CSS_SIZE
from .utils.error import TailwindMapperError, ToolError
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def read_css(file_path: Optional[Path]) -> str:
    """Read CSS from a file, or from stdin when no file is given.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or is too large
    """
    if file_path is None:
        return sys.stdin.read()

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Not a file: {file_path}")
    if file_path.stat().st_size > MAX_CSS_SIZE:
        raise ValueError(f"File too large (max {MAX_CSS_SIZE} bytes): {file_path}")
    return file_path.read_text(encoding='utf-8')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Convert CSS to TailwindCSS utility classes'
    )

    parser.add_argument(
        '-f', '--file',
        help='Path to a CSS file (default: read stdin)',
        type=Path
    )
    parser.add_argument(
        '-m', '--mode',
        help='Output format',
        choices=OUTPUT_MODES,
        default='classes'
    )
    parser.add_argument(
        '-t', '--tailwind-version',
        help='Target TailwindCSS version',
        choices=SUPPORTED_VERSIONS
    )
    parser.add_argument(
        '--mapping-file',
        help='JSON file with extra property mappings',
        type=str
    )
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    else:
        setup_logging()

    try:
        css = read_css(args.file)

        with ServiceRegistry() as registry:
            registry.create_utility_mapper(args.mapping_file)
            asyncio.run(registry.initialize_all())

            arguments = {'css': css, 'mode': args.mode}
            if args.tailwind_version:
                arguments['version'] = args.tailwind_version
            response = ToolDispatcher(registry).call_tool('convert_css_to_tailwind', arguments)

        print(response['content'][0]['text'])
        return 0

    except ToolError as e:
        logger.error(f"Error {e.code}: {e.message}")
        return 1
    except (TailwindMapperError, OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
