from __future__ import annotations

from signet_core.domain.loadable import Failed, Loading, Ready, map_loadable


def test_map_loadable_applies_to_ready_values() -> None:
    assert map_loadable(Ready([1, 2, 3]), len) == Ready(3)


def test_map_loadable_passes_loading_and_failed_through() -> None:
    loading = Loading()
    failed = Failed(ValueError("boom"))

    assert map_loadable(loading, len) is loading
    assert map_loadable(failed, len) is failed


def test_ready_empty_is_not_loading() -> None:
    assert Ready([]) != Loading()
