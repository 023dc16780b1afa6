"""Shared pytest configuration for tern examples.

Provides the ``example_bot`` fixture that loads a fresh Dispatcher
from the ``bot.py`` file in the same directory as the test.  Each call
re-executes bot.py in an isolated module namespace, so every test starts
with clean state (e.g. the ban list is empty).
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_module(request: pytest.FixtureRequest):
    """Load a fresh module from the sibling bot.py next to the test file."""
    bot_path = Path(request.path).parent / "bot.py"
    module_name = f"example_{bot_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, bot_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_bot(example_module):
    """The ``bot`` Dispatcher from the sibling bot.py."""
    return example_module.bot
