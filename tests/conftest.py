"""
Pytest configuration and shared fixtures for strkit tests.
"""

import pytest

from strkit.repl import Colors, StringSession
from strkit.runtime.case_insensitive import CaseInsensitiveView
from strkit.runtime.ops import QueryDispatchOps, StringOps


@pytest.fixture(autouse=True, scope="session")
def _plain_output():
    """Render harness output without ANSI colors."""
    Colors.disable()


@pytest.fixture
def core_ops():
    """The literal-only core operation set."""
    return StringOps()


@pytest.fixture
def ops(core_ops):
    """Query-aware operation set wrapping the core."""
    return QueryDispatchOps(core_ops)


@pytest.fixture
def view_factory():
    """Factory fixture for creating case-insensitive views."""

    def _create_view(subject: str) -> CaseInsensitiveView:
        return CaseInsensitiveView(subject)

    return _create_view


@pytest.fixture
def session():
    """Create a fresh harness session working on "hello world"."""
    return StringSession("hello world")


@pytest.fixture
def run_line(session):
    """Fixture to evaluate one harness line against the session."""

    def _run(line: str):
        return session.eval_line(line)

    return _run
