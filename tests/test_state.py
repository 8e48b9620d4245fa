"""Tests for LibraryState transitions and the load operation."""

import asyncio

import pytest

from portallib.api import LibraryClient, LibraryError
from portallib.models import Library
from portallib.state import LibraryState, load_library

from conftest import TEST_URL, make_transport


class FakeClient:
    """Client whose fetch resolves only when the test says so."""

    def __init__(self):
        self.pending: list[asyncio.Future] = []

    async def fetch_library(self) -> Library:
        future = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


class TestLibraryState:
    """Test state transitions."""

    def test_initial_state(self):
        state = LibraryState()
        assert state.library is None
        assert state.active_category is None
        assert state.loading is False
        assert state.error is None

    def test_finish_load_selects_first_category(self, library):
        state = LibraryState()
        state.begin_load()
        assert state.loading is True
        state.finish_load(library)
        assert state.loading is False
        assert state.active_category == "Chill"

    def test_finish_load_with_no_categories(self):
        state = LibraryState()
        state.begin_load()
        state.finish_load(Library())
        assert state.active_category is None

    def test_new_library_resets_selection(self, library):
        state = LibraryState()
        state.finish_load(library)
        state.select_index(2)
        assert state.active_category == "Horror"

        state.begin_load()
        state.finish_load(library)
        assert state.active_category == "Chill"

    def test_fail_load_replaces_library(self, library):
        state = LibraryState()
        state.finish_load(library)
        state.begin_load()
        state.fail_load("boom")
        assert state.library is None
        assert state.active_category is None
        assert state.error == "boom"
        assert state.loading is False

    def test_begin_load_clears_error(self):
        state = LibraryState()
        state.fail_load("boom")
        state.begin_load()
        assert state.error is None

    def test_select_index_out_of_range_is_ignored(self, library):
        state = LibraryState()
        state.finish_load(library)
        state.select_index(7)
        state.select_index(-1)
        assert state.active_category == "Chill"


class TestLoadLibrary:
    """Test the asynchronous load operation."""

    @pytest.mark.asyncio
    async def test_success(self):
        state = LibraryState()
        client = LibraryClient(url=TEST_URL, transport=make_transport())
        await load_library(state, client)
        assert state.error is None
        assert state.loading is False
        assert state.active_category == "Chill"

    @pytest.mark.asyncio
    async def test_http_error_becomes_message(self):
        state = LibraryState()
        client = LibraryClient(url=TEST_URL, transport=make_transport(status_code=500))
        await load_library(state, client)
        assert state.library is None
        assert state.error.startswith("Failed to load library: HTTP 500")

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_message(self):
        class BrokenClient:
            async def fetch_library(self):
                raise RuntimeError("kaboom")

        state = LibraryState()
        await load_library(state, BrokenClient())
        assert state.error == "An error occurred: kaboom"

    @pytest.mark.asyncio
    async def test_overlapping_loads_last_to_resolve_wins(self, library):
        state = LibraryState()
        client = FakeClient()

        first = asyncio.create_task(load_library(state, client))
        second = asyncio.create_task(load_library(state, client))
        await asyncio.sleep(0)
        assert len(client.pending) == 2
        assert state.loading is True

        # Second request resolves first with an error, then the first succeeds
        client.pending[1].set_exception(LibraryError("HTTP 503"))
        await second
        assert state.loading is True

        client.pending[0].set_result(library)
        await first
        assert state.loading is False
        assert state.error is None
        assert state.active_category == "Chill"
