"""Shared fixtures for BDD feature tests."""

from __future__ import annotations

import pytest

from tests.helpers.site_transport import RecordingSiteTransport


@pytest.fixture
def recording_transport() -> RecordingSiteTransport:
    """Provide a transport answering every request with an empty report."""
    return RecordingSiteTransport()
