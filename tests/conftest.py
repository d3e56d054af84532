import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Keep test runs from writing rotating log files into the project tree.
os.environ.setdefault("LOG_TO_FILE", "false")

import commands
from profiles import ProfileRegistry


@pytest.fixture(autouse=True)
def fresh_state():
    """Every test starts on the general profile with prefix emission enabled."""
    commands.init_state(profile_name="general", prefix_enabled=True)
    yield
    commands.active_config.reset()


@pytest.fixture
def registry():
    return ProfileRegistry()


@pytest.fixture
def general(registry):
    return registry.codec("general")


@pytest.fixture
def huawei(registry):
    return registry.codec("huawei")
