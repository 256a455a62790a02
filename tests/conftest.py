"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides sample source mappings and bound sources for all tests
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from envvar import from_source


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def source_values():
    """Provide a sample source mapping."""
    return {
        "STRING": "oh hai",
        "EMPTY": "",
        "INTEGER": "12",
        "NEGATIVE_INTEGER": "-12",
        "FLOAT": "12.43",
        "BOOL": "TRUE",
        "PORT": "8080",
        "URL": "HTTP://Example.COM:80",
        "JSON_OBJECT": '{"name": "value"}',
        "JSON_ARRAY": "[1, 2, 3]",
        "COMMA_ARRAY": "1,2,3",
        "DASH_ARRAY": "1-2-3",
        "ENUM": "VALID",
        "BASE64": "aGVsbG8=",
    }


@pytest.fixture
def source(source_values):
    """Provide a source bound to the sample mapping."""
    return from_source(source_values)


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        "ENVVAR_TEST_PORT": "5432",
        "ENVVAR_TEST_DEBUG": "false",
        "ENVVAR_TEST_HOSTS": "a.example.com,b.example.com",
    }


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Mock environment variables for testing."""
    with patch.dict(os.environ, test_env_vars, clear=False):
        yield test_env_vars
