"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-19

Global pytest configuration and fixtures for the draftkeep test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Headless Qt for CI and local runs without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to sys.path so 'draftkeep' imports without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from draftkeep.core.autosave_settings import AutosaveSettings
from draftkeep.core.draft_store import DraftStore
from draftkeep.infra.storage import MemoryDraftStorage
from tests.mocks import EDITOR_ID, FakeEditorHost, ManualClock


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


@pytest.fixture
def clock():
    """Manually advanced millisecond clock."""
    return ManualClock()


@pytest.fixture
def editor():
    """Empty, clean fake editor."""
    return FakeEditorHost()


@pytest.fixture
def storage():
    """In-memory draft storage."""
    return MemoryDraftStorage()


@pytest.fixture
def settings():
    """Settings with a one minute retention window."""
    return AutosaveSettings(prefix="test-", interval_ms=1000, retention_ms=60_000)


@pytest.fixture
def store(qapp, storage, editor, settings, clock):
    """DraftStore wired to the fake editor, memory storage and manual clock."""
    _ = qapp
    return DraftStore(storage, editor, settings, EDITOR_ID, clock=clock)


@pytest.fixture
def signal_log(store):
    """Ordered list of (signal_name, editor_id) emitted by the store."""
    log = []
    store.draft_stored.connect(lambda editor_id: log.append(("stored", editor_id)))
    store.draft_removed.connect(lambda editor_id: log.append(("removed", editor_id)))
    store.draft_restored.connect(lambda editor_id: log.append(("restored", editor_id)))
    return log
