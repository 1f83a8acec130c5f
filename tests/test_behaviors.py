"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from greeter.domain import behaviors


@pytest.mark.os_agnostic
def test_build_hello_appends_the_hello_suffix() -> None:
    """build_hello joins the name and the greeting suffix without a separator."""
    assert behaviors.build_hello("Fred") == "Fredさん　こんにちは。"


@pytest.mark.os_agnostic
def test_build_goodbye_appends_the_goodbye_suffix() -> None:
    """build_goodbye joins the name and the farewell suffix without a separator."""
    assert behaviors.build_goodbye("Mary") == "Maryさん　さようなら"


@pytest.mark.os_agnostic
def test_suffixes_use_the_ideographic_space() -> None:
    """Both suffixes separate honorific and phrase with U+3000, not an ASCII space."""
    assert "　" in behaviors.HELLO_SUFFIX
    assert "　" in behaviors.GOODBYE_SUFFIX
    assert " " not in behaviors.HELLO_SUFFIX + behaviors.GOODBYE_SUFFIX


@pytest.mark.os_agnostic
def test_goodbye_suffix_has_no_trailing_period() -> None:
    """The farewell ends without the ideographic full stop the greeting carries."""
    assert behaviors.HELLO_SUFFIX.endswith("。")
    assert not behaviors.GOODBYE_SUFFIX.endswith("。")


@pytest.mark.os_agnostic
def test_call_signature_wraps_the_raw_identifier() -> None:
    """The trace line keeps the identifier verbatim, even when empty."""
    assert behaviors.call_signature("SayHello", "abc") == "SayHello(abc)"
    assert behaviors.call_signature("SayHello", "") == "SayHello()"


@pytest.mark.os_agnostic
@given(name=st.text())
def test_build_hello_always_starts_with_name_and_ends_with_suffix(name: str) -> None:
    """For any name the greeting is exactly name + suffix."""
    greeting = behaviors.build_hello(name)

    assert greeting.startswith(name)
    assert greeting.endswith(behaviors.HELLO_SUFFIX)
    assert len(greeting) == len(name) + len(behaviors.HELLO_SUFFIX)
