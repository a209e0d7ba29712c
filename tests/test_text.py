from hypothesis import given
from hypothesis import strategies as st

from algokit.text import split_sentence

words = st.lists(
    st.text(alphabet=st.characters(blacklist_characters=" "), min_size=1, max_size=8),
    min_size=1,
    max_size=10,
)


def test_simple_sentence():
    assert split_sentence("alpha beta gamma") == ["alpha", "beta", "gamma"]


@given(words)
def test_join_round_trip(items):
    assert split_sentence(" ".join(items)) == items


def test_double_space_gives_empty_field():
    assert split_sentence("a  b") == ["a", "", "b"]


def test_leading_space_gives_empty_first_field():
    assert split_sentence(" a b") == ["", "a", "b"]


def test_trailing_space_dropped():
    assert split_sentence("a b ") == ["a", "b"]


def test_only_last_trailing_field_dropped():
    assert split_sentence("a b  ") == ["a", "b", ""]


def test_empty_sentence():
    assert split_sentence("") == []


def test_newlines_are_not_separators():
    assert split_sentence("one\ntwo three") == ["one\ntwo", "three"]