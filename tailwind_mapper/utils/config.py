"""Configuration utility for Tailwind Mapper."""

import os

# Project version
VERSION = "1.0.0"

# Default directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Tailwind target version and output shape
DEFAULT_TAILWIND_VERSION = os.environ.get('TAILWIND_MAPPER_VERSION', 'v4')
DEFAULT_OUTPUT_MODE = 'classes'
COMPONENT_SELECTOR = '.component'

# Input size limits (in bytes)
MAX_CSS_SIZE = int(os.environ.get('TAILWIND_MAPPER_MAX_CSS_SIZE', 1 * 1024 * 1024))  # 1 MB

# Optional JSON file with extra property mappings, merged at start-up
PROPERTY_TABLE_FILE = os.environ.get('TAILWIND_MAPPER_PROPERTY_TABLE') or None

# Logging
LOG_FILE = os.environ.get('TAILWIND_MAPPER_LOG_FILE') or None
LOG_LEVEL = os.environ.get('TAILWIND_MAPPER_LOG_LEVEL', 'INFO')

# Exported config
__all__ = [
    'VERSION', 'BASE_DIR',
    'DEFAULT_TAILWIND_VERSION', 'DEFAULT_OUTPUT_MODE', 'COMPONENT_SELECTOR',
    'MAX_CSS_SIZE', 'PROPERTY_TABLE_FILE',
    'LOG_FILE', 'LOG_LEVEL',
]
