"""User directory stories: the fixed reference table."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from greeter.adapters.directory import DEFAULT_USERS, SimpleDataStore, new_simple_data_store


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("user_id", "name"),
    [("1", "Fred"), ("2", "Mary"), ("3", "Pat")],
)
def test_reference_table_resolves_known_identifiers(user_id: str, name: str) -> None:
    """Each reference identifier maps to its display name."""
    assert new_simple_data_store().user_name_for_id(user_id) == (name, True)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("user_id", ["", "0", "4", "01", " 1", "Fred"])
def test_unknown_identifiers_report_not_found(user_id: str) -> None:
    """Anything outside the table yields an empty name and False, never an error."""
    assert new_simple_data_store().user_name_for_id(user_id) == ("", False)


@pytest.mark.os_agnostic
def test_store_copies_the_mapping_at_construction() -> None:
    """Mutating the source dict afterwards does not change the store."""
    source = {"7": "Ann"}
    store = SimpleDataStore(source)

    source["7"] = "Bob"
    source["8"] = "Cid"

    assert store.user_name_for_id("7") == ("Ann", True)
    assert store.user_name_for_id("8") == ("", False)


@pytest.mark.os_agnostic
def test_store_exposes_a_read_only_view() -> None:
    """The user_data view rejects writes."""
    store = new_simple_data_store()

    with pytest.raises(TypeError):
        store.user_data["4"] = "Eve"  # type: ignore[index]


@pytest.mark.os_agnostic
def test_reference_table_is_immutable() -> None:
    """DEFAULT_USERS cannot be modified at runtime."""
    with pytest.raises(TypeError):
        DEFAULT_USERS["9"] = "Zed"  # type: ignore[index]


@pytest.mark.os_agnostic
@given(user_id=st.text().filter(lambda value: value not in DEFAULT_USERS))
def test_every_other_identifier_is_unknown(user_id: str) -> None:
    """No identifier outside the three reference keys is ever found."""
    assert new_simple_data_store().user_name_for_id(user_id) == ("", False)
