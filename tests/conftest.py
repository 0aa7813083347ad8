"""Pytest fixtures for parser testing."""

import pytest

from navparse import EventRecorder, NMEAParser


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def parser(recorder: EventRecorder) -> NMEAParser:
    return NMEAParser(recorder)
