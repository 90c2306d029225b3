"""Pytest configuration for Tailwind Mapper tests."""

import asyncio
import logging
import pytest

from ..core.properties import build_default_table
from ..core.service import ConversionService
from ..services.utility_mapper import UtilityMapperService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture(scope='session')
def table():
    """Return the default property table."""
    return build_default_table()

@pytest.fixture(scope='session')
def conversion_service(table):
    """Return a conversion service over the default table."""
    return ConversionService(table)

@pytest.fixture
def utility_mapper():
    """Return an initialized utility mapper without an extra mapping file."""
    service = UtilityMapperService(mapping_file=None)
    asyncio.run(service.initialize())
    yield service
    service.cleanup()

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
    /* Layout */
    .container {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 1rem;
    }

    .sidebar {
        width: 425px;
        margin: 1.75rem;
        filter: blur(5px);
    }

    @media (min-width: 768px) {
        .container {
            flex-direction: column;
        }
    }
    """

@pytest.fixture(scope='session')
def mixed_batch_css():
    """Return CSS spread over two rules, all of it convertible."""
    return """
    .a { margin: 0; padding: 1rem; width: 100%; display: block; }
    .b { margin: 0.25rem; height: auto; }
    """

@pytest.fixture
def mapping_file(tmp_path):
    """Write a property mapping file and return its path."""
    path = tmp_path / 'mapping.json'
    path.write_text(
        '{"margin": {"values": {"1.75rem": "m-7", "0": "m-zero"}},'
        ' "opacity": {"abbreviation": "opacity", "category": "effects",'
        ' "values": {"0.5": "opacity-50"}}}',
        encoding='utf-8'
    )
    return str(path)
