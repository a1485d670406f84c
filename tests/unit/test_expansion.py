"""Unit tests for expansion state and level filter."""

from wbs_engine.engine import ExpansionState, LevelFilter


class TestExpansionState:
    def test_empty_by_default(self):
        state = ExpansionState()
        assert len(state) == 0
        assert not state.is_expanded("1")

    def test_toggle_adds_then_removes(self):
        state = ExpansionState().toggle("1")
        assert state.is_expanded("1")
        assert not state.toggle("1").is_expanded("1")

    def test_toggle_twice_restores(self):
        state = ExpansionState(["1", "2-1"])
        assert state.toggle("3").toggle("3") == state
        assert state.toggle("1").toggle("1") == state

    def test_toggle_returns_new_state(self):
        state = ExpansionState(["1"])
        toggled = state.toggle("2")
        assert state.ids == frozenset({"1"})
        assert toggled.ids == frozenset({"1", "2"})

    def test_stale_ids_allowed(self):
        state = ExpansionState(["삭제된 작업"])
        assert "삭제된 작업" in state

    def test_hashable_and_comparable(self):
        assert ExpansionState(["1", "2"]) == ExpansionState(["2", "1"])
        assert len({ExpansionState(["1"]), ExpansionState(["1"])}) == 1

    def test_not_equal_to_level_filter(self):
        assert ExpansionState([1]) != LevelFilter([1])


class TestLevelFilter:
    def test_default_allows_levels_one_to_five(self):
        level_filter = LevelFilter()
        assert level_filter.levels == frozenset({1, 2, 3, 4, 5})
        assert not level_filter.allows(6)

    def test_toggle(self):
        level_filter = LevelFilter().toggle(3)
        assert not level_filter.allows(3)
        assert level_filter.toggle(3) == LevelFilter()

    def test_toggle_returns_level_filter(self):
        assert isinstance(LevelFilter().toggle(1), LevelFilter)
