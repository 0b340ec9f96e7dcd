"""Author Register — tests for the ordered unique author collection.

Tests cover:
    - add_author: True then False for the same id; None rejected
    - get_all_authors: insertion order, defensive copy
    - search_author_by_name: case-insensitive exact match, no substring
    - get_author_by_id: found / None, never raises
    - remove_author: True once, then False; id <= 0 rejected
"""

import pytest

from workout_diary.core.author import Author
from workout_diary.core.author_register import AuthorRegister
from workout_diary.core.errors import InvalidArgumentError
from workout_diary.core.id_allocator import IdAllocator


# ─── add_author ──────────────────────────────────────────────────

def test_add_same_author_twice():
    register = AuthorRegister()
    author = Author("Bjorn")
    assert register.add_author(author) is True
    assert register.add_author(author) is False
    assert register.get_author_count() == 1


def test_add_different_instance_with_same_id_rejected():
    register = AuthorRegister()
    register.add_author(Author("Bjorn", IdAllocator()))
    assert register.add_author(Author("Impostor", IdAllocator())) is False
    assert register.get_all_authors()[0].name == "Bjorn"


def test_add_none_rejected():
    with pytest.raises(InvalidArgumentError):
        AuthorRegister().add_author(None)


def test_same_name_different_ids_both_added():
    register = AuthorRegister()
    assert register.add_author(Author("Bjorn"))
    assert register.add_author(Author("Bjorn"))
    assert len(register) == 2


# ─── get_all_authors ─────────────────────────────────────────────

def test_get_all_authors_preserves_insertion_order():
    register = AuthorRegister()
    names = ["Polo", "Bjorn", "ola"]
    for name in names:
        register.add_author(Author(name))
    assert [a.name for a in register.get_all_authors()] == names


def test_get_all_authors_returns_copy():
    register = AuthorRegister()
    register.add_author(Author("Bjorn"))
    snapshot = register.get_all_authors()
    snapshot.clear()
    assert register.get_author_count() == 1


def test_empty_register():
    register = AuthorRegister()
    assert register.get_all_authors() == []
    assert register.get_author_count() == 0


# ─── search_author_by_name ───────────────────────────────────────

def test_search_is_case_insensitive_exact():
    register = AuthorRegister()
    bjorn = Author("Bjorn")
    register.add_author(bjorn)
    assert register.search_author_by_name("bjorn") == [bjorn]
    assert register.search_author_by_name("BJORN") == [bjorn]


def test_search_does_not_match_substring():
    register = AuthorRegister()
    register.add_author(Author("Bjorn"))
    assert register.search_author_by_name("bjo") == []


def test_search_distinguishes_olav_and_ola():
    register = AuthorRegister()
    olav, ola = Author("olav"), Author("ola")
    register.add_author(olav)
    register.add_author(ola)
    assert register.search_author_by_name("ola") == [ola]


def test_search_returns_every_match_in_order():
    register = AuthorRegister()
    first, second = Author("Bjorn"), Author("bjorn")
    register.add_author(first)
    register.add_author(Author("Polo"))
    register.add_author(second)
    assert register.search_author_by_name("Bjorn") == [first, second]


@pytest.mark.parametrize("name", [None, "", "  "])
def test_search_blank_name_rejected(name):
    with pytest.raises(InvalidArgumentError):
        AuthorRegister().search_author_by_name(name)


# ─── get_author_by_id ────────────────────────────────────────────

def test_get_author_by_id_found():
    register = AuthorRegister()
    polo = Author("Polo")
    register.add_author(polo)
    assert register.get_author_by_id(polo.id) is polo


@pytest.mark.parametrize("author_id", [99, 0, -1])
def test_get_author_by_id_missing_returns_none(author_id):
    register = AuthorRegister()
    register.add_author(Author("Polo"))
    assert register.get_author_by_id(author_id) is None


# ─── remove_author ───────────────────────────────────────────────

def test_remove_author_once():
    register = AuthorRegister()
    author = Author("Bjorn")
    register.add_author(author)
    assert register.remove_author(author.id) is True
    assert register.remove_author(author.id) is False
    assert register.get_author_count() == 0


def test_remove_unknown_id_returns_false():
    assert AuthorRegister().remove_author(42) is False


@pytest.mark.parametrize("author_id", [0, -3])
def test_remove_non_positive_id_rejected(author_id):
    with pytest.raises(InvalidArgumentError):
        AuthorRegister().remove_author(author_id)


def test_remove_keeps_order_of_others():
    register = AuthorRegister()
    a, b, c = Author("a"), Author("b"), Author("c")
    for author in (a, b, c):
        register.add_author(author)
    register.remove_author(b.id)
    assert register.get_all_authors() == [a, c]


def test_removed_author_can_be_added_again():
    register = AuthorRegister()
    author = Author("Bjorn")
    register.add_author(author)
    register.remove_author(author.id)
    assert register.add_author(author) is True
