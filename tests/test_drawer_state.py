"""Tests for drawer state caching and eviction."""


def test_get_state_creates_and_resets_counter():
    from pyqt_serialdict.editor import DrawerStateCache

    cache = DrawerStateCache(idle_limit=2)
    state = cache.get_state("a")
    state.not_accessed_counter = 5

    assert cache.get_state("a") is state
    assert state.not_accessed_counter == 0
    assert cache.try_get_state("missing") is None


def test_idle_states_evicted_after_limit():
    from pyqt_serialdict.editor import DrawerStateCache

    cache = DrawerStateCache(idle_limit=2)
    cache.get_state("idle")

    for _ in range(3):
        cache.get_state("active")
        cache.clear_unused_states()
    assert "idle" in cache

    cache.get_state("active")
    cache.clear_unused_states()

    assert "idle" not in cache
    assert "active" in cache
    assert len(cache) == 1


def test_idle_limit_defaults_to_config():
    from pyqt_serialdict.editor import DrawerStateCache
    from pyqt_serialdict.protocols import DrawerConfig, set_drawer_config

    assert DrawerStateCache().effective_idle_limit == 60

    set_drawer_config(DrawerConfig(state_idle_limit=5))
    assert DrawerStateCache().effective_idle_limit == 5


def test_get_warnings_defaults_to_empty():
    from pyqt_serialdict.editor import DictionaryState, EntryWarning

    state = DictionaryState()
    assert state.get_warnings(0) == []

    warning = EntryWarning(1, "Duplicate key")
    state.warnings = {1: [warning]}
    assert state.get_warnings(1) == [warning]
    assert state.get_warnings(0) == []
