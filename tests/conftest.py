"""Pytest configuration and fixtures."""

import copy

import pytest


SAMPLE_ENTRY = {
    "sys": {
        "id": "1",
        "type": "Entry",
        "revision": 3,
        "createdAt": "2024-01-15T12:00:00.000Z",
        "updatedAt": "2024-02-01T08:30:00.000Z",
        "space": {"sys": {"type": "Link", "linkType": "Space", "id": "space-1"}},
        "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": "post"}},
    },
    "fields": {
        "title": {"en": "Hello", "de": "Hallo"},
    },
}


class FakeSource:
    """Entries source returning a canned payload and recording queries."""

    def __init__(self, items=None, error=None):
        self.items = items if items is not None else []
        self.error = error
        self.calls = []

    def get_entries(self, params):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return {"sys": {"type": "Array"}, "total": len(self.items), "skip": 0, "limit": 100, "items": self.items}


@pytest.fixture
def sample_entry():
    """A fresh copy of a two-locale entry."""
    return copy.deepcopy(SAMPLE_ENTRY)


@pytest.fixture
def make_entry():
    """Build an entry payload with the given id and fields."""

    def _make(entry_id, fields, **sys_extra):
        entry = copy.deepcopy(SAMPLE_ENTRY)
        entry["sys"]["id"] = entry_id
        entry["sys"].update(sys_extra)
        entry["fields"] = fields
        return entry

    return _make


@pytest.fixture
def fake_source():
    return FakeSource
