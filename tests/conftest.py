"""Global pytest configuration and fixtures for all tests."""

import os

import pytest

from hexaparking.di import reset_dependencies

TEST_ENV_VARS = {
    "ENABLE_DOCS": "true",
    "INFRASTRUCTURE_PROVIDER": "memory",
    "LOG_LEVEL": "DEBUG",
}


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Tests run against the in-memory provider so no files are written.
    """
    original_env = {}

    for key, value in TEST_ENV_VARS.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture(autouse=True)
def fresh_dependencies(set_test_env_vars):
    """Give every test its own settings, stores and services."""
    reset_dependencies()
    yield
    reset_dependencies()
