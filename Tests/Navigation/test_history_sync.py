"""Tests for the session history and the history synchronizer."""

from unittest.mock import MagicMock

import pytest

from view_router.errors import RouteConfigError
from view_router.navigation import HistorySynchronizer
from view_router.state import NavigationState


class TestNavigationState:

    def test_starts_with_initial_entry(self):
        state = NavigationState(initial_path="/start")
        assert state.current_path == "/start"
        assert state.paths() == ["/start"]
        assert not state.can_go_back
        assert not state.can_go_forward

    def test_push_truncates_forward_entries(self):
        state = NavigationState(initial_path="/a")
        state.push("/b")
        state.push("/c")
        state.back()
        state.back()

        state.push("/d")

        assert state.paths() == ["/a", "/d"]
        assert state.current_path == "/d"
        assert not state.can_go_forward

    def test_push_never_fires_pop(self):
        state = NavigationState()
        listener = MagicMock()
        state.subscribe(listener)

        state.push("/a")

        listener.assert_not_called()

    def test_traversal_fires_pop_with_entry(self):
        state = NavigationState(initial_path="/a")
        state.push("/b")
        listener = MagicMock()
        state.subscribe(listener)

        entry = state.back()

        listener.assert_called_once_with(entry)
        assert entry.path == "/a"

    @pytest.mark.parametrize("delta", [0, -1, 1, 5])
    def test_out_of_range_traversal_is_silent(self, delta):
        state = NavigationState(initial_path="/a")
        listener = MagicMock()
        state.subscribe(listener)

        assert state.go(delta) is None
        listener.assert_not_called()
        assert state.current_path == "/a"

    def test_max_history_drops_oldest(self):
        state = NavigationState(initial_path="/0", max_history=3)
        for i in range(1, 5):
            state.push(f"/{i}")

        assert state.paths() == ["/2", "/3", "/4"]
        assert state.current_path == "/4"
        assert state.index == 2

    def test_entries_are_distinct_for_same_path(self):
        state = NavigationState(initial_path="/a")
        state.push("/a")
        first, second = state.history
        assert first.path == second.path
        assert first != second

    def test_unsubscribe(self):
        state = NavigationState(initial_path="/a")
        state.push("/b")
        listener = MagicMock()
        unsubscribe = state.subscribe(listener)

        unsubscribe()
        unsubscribe()
        state.back()

        listener.assert_not_called()

    @pytest.mark.parametrize("max_history", [0, -3, "10", True])
    def test_max_history_must_be_positive_int(self, max_history):
        with pytest.raises(RouteConfigError):
            NavigationState(max_history=max_history)


class TestHistorySynchronizer:

    def test_pop_re_resolves(self):
        state = NavigationState(initial_path="/a")
        state.push("/b")
        controller = MagicMock()
        sync = HistorySynchronizer(state, controller)
        sync.attach()

        state.back()

        controller.resolve.assert_called_once_with()
        controller.navigate.assert_not_called()

    def test_attach_is_idempotent(self):
        state = NavigationState(initial_path="/a")
        state.push("/b")
        controller = MagicMock()
        sync = HistorySynchronizer(state, controller)
        sync.attach()
        sync.attach()

        state.back()

        assert controller.resolve.call_count == 1

    def test_detach_stops_resolving(self):
        state = NavigationState(initial_path="/a")
        state.push("/b")
        controller = MagicMock()
        sync = HistorySynchronizer(state, controller)
        sync.attach()
        sync.detach()

        state.back()

        assert not sync.attached
        controller.resolve.assert_not_called()

    def test_navigate_does_not_double_resolve(self, make_router):
        router = make_router()
        router.start()
        resolve = MagicMock(wraps=router.controller.resolve)
        router.controller.resolve = resolve

        router.navigate("/dashboard")

        resolve.assert_called_once_with()
