"""Shared test fixtures and configuration for bitgene tests."""

from collections import deque

import pytest

from bitgene import randomization


class ScriptedRandomSource:
    """Random source that returns queued values, then falls back to ``min_value``."""

    def __init__(self, *values: int) -> None:
        self.values = deque(values)
        self.calls: list[tuple[int, int]] = []

    def get_int(self, min_value: int, max_value: int) -> int:
        self.calls.append((min_value, max_value))
        if self.values:
            return self.values.popleft()
        return min_value


@pytest.fixture
def scripted_source():
    """Factory for sources that hand out fixed values."""
    return ScriptedRandomSource


@pytest.fixture(autouse=True)
def restore_current_source():
    """Keep tests from leaking a replaced process-wide source."""
    previous = randomization.get_current()
    yield
    randomization.set_current(previous)
