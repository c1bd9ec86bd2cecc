"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat scale-building or client boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.scale_calc import Note, spell_scale

# ---------------------------------------------------------------------------
# Resolved scales
# ---------------------------------------------------------------------------


@pytest.fixture()
def c_major():
    """Resolved C Major scale (all naturals)."""
    return spell_scale(Note("C"), "Major")


@pytest.fixture()
def a_harmonic_minor():
    """Resolved A Harmonic Minor scale (G♯ leading tone)."""
    return spell_scale(Note("A"), "Harmonic Minor")


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` against the real app."""
    with TestClient(app) as c:
        yield c
