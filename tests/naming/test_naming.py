"""Scoped unique names tests"""

import gc
import typing as t

import pytest
from pytest_data_suites import DataSuite

from actionkit.actions.types import ActionKind, ActionRecord
from actionkit.exceptions import NameCollisionExhausted
from actionkit.naming import UniqueNameGenerator, get_next_entity_name, group_by_page
from actionkit.store import ActionStore


class ResolveNameTestCase(t.TypedDict):
    name: str
    page_id: str
    is_copy: bool
    expected: str


class ResolveNameDataSuite(DataSuite):
    free_name = ResolveNameTestCase(name="Query3", page_id="page-A", is_copy=False, expected="Query3")
    skips_taken_suffix = ResolveNameTestCase(name="Query1", page_id="page-A", is_copy=False, expected="Query12")
    copy_suffix = ResolveNameTestCase(name="Query1", page_id="page-A", is_copy=True, expected="Query1Copy1")
    copy_of_free_name = ResolveNameTestCase(name="Query3", page_id="page-A", is_copy=True, expected="Query3")
    other_page_is_ignored = ResolveNameTestCase(name="Query2", page_id="page-A", is_copy=False, expected="Query2")
    unknown_page = ResolveNameTestCase(name="Query1", page_id="page-Z", is_copy=False, expected="Query1")
    empty_name = ResolveNameTestCase(name="", page_id="page-A", is_copy=False, expected="")


@ResolveNameDataSuite.parametrize
def test_resolve_name(store: ActionStore, name: str, page_id: str, is_copy: bool, expected: str) -> None:
    """Names are resolved within the destination page"""
    generator = UniqueNameGenerator(store)
    assert generator.resolve_name(name, page_id, is_copy=is_copy) == expected


def test_resolve_name_is_idempotent(store: ActionStore) -> None:
    """Unchanged collection gives the same answer"""
    generator = UniqueNameGenerator(store)
    assert generator("Api1", "page-A") == generator("Api1", "page-A") == "Api11"


def test_copy_numbering_continues(store: ActionStore) -> None:
    """Consecutive copies get consecutive suffixes once committed"""
    generator = UniqueNameGenerator(store)
    for num in range(1, 4):
        name: str = generator.resolve_name("Query1", "page-A", is_copy=True)
        assert name == f"Query1Copy{num}"
        store.add(ActionRecord(id=f"copy-{num}", name=name, page_id="page-A", kind=ActionKind.DB))


def test_grouping_follows_store_changes(store: ActionStore) -> None:
    """Cached grouping is dropped on change notification"""
    generator = UniqueNameGenerator(store)
    first_groups = generator.groups
    assert generator.groups is first_groups
    store.rename("q3", "Renamed")
    assert generator.groups is not first_groups
    assert generator.page_action_names("page-B") == ["Renamed"]
    store.add(ActionRecord(id="n1", name="Fresh", page_id="page-C", kind=ActionKind.AI))
    assert generator.resolve_name("Fresh", "page-C") == "Fresh1"
    store.remove("n1")
    assert generator.resolve_name("Fresh", "page-C") == "Fresh"


def test_closed_generator_still_tracks_version(store: ActionStore) -> None:
    """Grouping is refreshed by version even without notifications"""
    generator = UniqueNameGenerator(store)
    generator.close()
    assert generator.resolve_name("Query2", "page-B") == "Query21"
    store.remove("q3")
    assert generator.resolve_name("Query2", "page-B") == "Query2"


def test_group_by_page(page_actions: t.List[ActionRecord]) -> None:
    """Grouping keeps order and is read-only"""
    groups = group_by_page(page_actions)
    assert [action.id for action in groups["page-A"]] == ["a1", "q1", "q2"]
    assert [action.id for action in groups["page-B"]] == ["q3"]
    with pytest.raises(TypeError):
        groups["page-C"] = ()  # type: ignore


def test_next_entity_name_fills_gaps() -> None:
    """Smallest free suffix is taken"""
    assert get_next_entity_name("Api", ["Api", "Api1", "Api3"]) == "Api2"
    assert get_next_entity_name("Api", []) == "Api1"


def test_next_entity_name_limit() -> None:
    """Capped search gives up"""
    with pytest.raises(NameCollisionExhausted, match="within 2 candidates"):
        get_next_entity_name("Api", ["Api1", "Api2"], limit=2)
    assert get_next_entity_name("Api", ["Api1", "Api2"], limit=3) == "Api3"


def test_configured_limit(monkeypatch: pytest.MonkeyPatch, store: ActionStore) -> None:
    """Search cap is taken from the environment"""
    monkeypatch.setenv("ACTIONKIT_NAME_SEARCH_LIMIT", "1")
    generator = UniqueNameGenerator(store)
    with pytest.raises(NameCollisionExhausted):
        generator.resolve_name("Query1", "page-A")
    assert generator.resolve_name("Query1", "page-A", is_copy=True) == "Query1Copy1"


def test_generators_do_not_pile_up_on_store(store: ActionStore) -> None:
    """Forgotten generators drop their subscriptions"""
    baseline: int = store.subscribers_count
    for _ in range(100):
        UniqueNameGenerator(store).resolve_name("Query1", "page-A")
    gc.collect()
    assert store.subscribers_count == baseline
    store.add(ActionRecord(id="n1", name="Fresh", page_id="page-C", kind=ActionKind.AI))


def test_generator_context_manager(store: ActionStore) -> None:
    """Leaving the context unsubscribes"""
    baseline: int = store.subscribers_count
    with UniqueNameGenerator(store) as generator:
        assert store.subscribers_count == baseline + 1
        assert generator.resolve_name("Query1", "page-A") == "Query12"
    assert store.subscribers_count == baseline
