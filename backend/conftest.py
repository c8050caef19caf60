"""Shared pytest fixtures."""

import itertools

import pytest

from repositories import FileBackend
from store import ItemStore


class MemoryBackend:
    """Backend double holding the last saved list; can be told to fail."""

    def __init__(self, items=None):
        self.items = list(items or [])
        self.fail_save = False
        self.fail_load = False
        self.saves = 0

    def load(self):
        if self.fail_load:
            raise OSError("backend unavailable")
        return [dict(it) if isinstance(it, dict) else it for it in self.items]

    def save(self, items):
        if self.fail_save:
            raise OSError("disk full")
        self.saves += 1
        self.items = [dict(it) for it in items]

    def close(self):
        pass


@pytest.fixture
def clock():
    ticks = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend, clock):
    return ItemStore(backend, clock=clock)


@pytest.fixture
def items_file(tmp_path):
    return tmp_path / "data" / "items.json"


@pytest.fixture
def file_store(items_file, clock):
    return ItemStore(FileBackend(items_file), clock=clock)
