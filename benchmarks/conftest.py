"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def small_config() -> str:
    """A typical hand-written config block."""
    return """
        --save --tag --comment="done"
        --port=8081  --path '/some/path'
        --title "a few words in quotes"
    """


@pytest.fixture
def large_config() -> str:
    """Generate a large config text (~100KB)."""
    lines = []
    for i in range(2000):
        lines.append(f"--flag-{i}=value-{i} --name-{i} 'quoted value {i}'")
        lines.append(f'    --comment-{i}="spans two" `and back {i}`')
    return "\n".join(lines)
