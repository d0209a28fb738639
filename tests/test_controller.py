import pytest

from contactbook.controller import (
    AVATAR_COLORS,
    ContactBook,
    avatar_color,
    initials,
)
from contactbook.manager import ContactManager, ContactNotFoundError
from contactbook.storage import load


@pytest.fixture
def book(tmp_path):
    return ContactBook(tmp_path / "contacts.txt")


def _reload(book):
    manager = ContactManager()
    load(manager, book.path)
    return manager


def test_initials_two_words():
    assert initials("john smith") == "JS"


def test_initials_uses_only_first_two_words():
    assert initials("  anna maria  lopez ") == "AM"


def test_initials_single_word_and_empty():
    assert initials("bob") == "B"
    assert initials("   ") == ""


def test_avatar_color_empty_name_is_first_palette_entry():
    assert avatar_color("") == "#5e5ce6"


@pytest.mark.parametrize("name", ["Alice", "Bob Jones", "Zoë", "名前", "x" * 50])
def test_avatar_color_is_from_palette_and_stable(name):
    color = avatar_color(name)
    assert color in AVATAR_COLORS
    assert avatar_color(name) == color


def test_avatar_color_steps_through_palette():
    colors = {avatar_color(chr(c)) for c in range(ord("a"), ord("a") + 8)}
    assert colors == set(AVATAR_COLORS)


def test_new_book_loads_existing_file(tmp_path):
    path = tmp_path / "contacts.txt"
    path.write_text("Ann,123,ann@example.com,1\nBen,456,ben@example.com,0\n")
    book = ContactBook(path)
    assert [c.name for c in book.visible_contacts()] == ["Ann", "Ben"]
    assert book.manager.get("ann").favorite is True


def test_missing_file_gives_empty_book(book):
    assert book.visible_contacts() == []
    assert book.count_text() == "0 Contacts"


def test_add_saves_to_file(book):
    contact = book.add("Ann", "123", "ann@example.com")
    assert contact.name == "Ann"
    stored = _reload(book).get("Ann")
    assert (stored.phone_number, stored.email) == ("123", "ann@example.com")


def test_search_and_favorite_filter(book):
    book.add("Alice", "1", "alice@example.com")
    book.add("Albert", "2", "albert@example.com")
    book.add("Bob", "3", "bob@example.com")
    book.search_text = "al"
    assert [c.name for c in book.visible_contacts()] == ["Albert", "Alice"]
    book.open(book.manager.get("Alice"))
    book.toggle_favorite()
    book.show_favorites = True
    assert [c.name for c in book.visible_contacts()] == ["Alice"]
    assert book.count_text() == "1 Contacts"
    book.search_text = "b"
    assert book.visible_contacts() == []


def test_toggle_favorite_saves(book):
    book.add("Ann", "1", "ann@example.com")
    book.open(book.manager.get("Ann"))
    assert book.toggle_favorite() is True
    assert _reload(book).get("Ann").favorite is True
    assert book.toggle_favorite() is False
    assert _reload(book).get("Ann").favorite is False


def test_rename_keeps_details_and_favorite(book):
    book.add("Ann", "1", "ann@example.com")
    book.open(book.manager.get("Ann"))
    book.toggle_favorite()
    renamed = book.rename("Anna")
    assert renamed is book.current
    assert renamed.name == "Anna"
    assert "Ann" not in book.manager
    stored = _reload(book).get("Anna")
    assert (stored.phone_number, stored.email, stored.favorite) == (
        "1",
        "ann@example.com",
        True,
    )


def test_set_email_and_phone(book):
    book.add("Ann", "1", "ann@example.com")
    book.open(book.manager.get("Ann"))
    book.set_email("other@example.com")
    book.set_phone_number("99")
    stored = _reload(book).get("Ann")
    assert (stored.email, stored.phone_number) == ("other@example.com", "99")


def test_delete_removes_and_closes(book):
    book.add("Ann", "1", "ann@example.com")
    book.add("Ben", "2", "ben@example.com")
    book.open(book.manager.get("Ann"))
    book.delete()
    assert book.current is None
    assert [c.name for c in _reload(book)] == ["Ben"]


@pytest.mark.parametrize(
    "action",
    [
        lambda b: b.toggle_favorite(),
        lambda b: b.rename("X"),
        lambda b: b.set_email("x@example.com"),
        lambda b: b.set_phone_number("1"),
        lambda b: b.delete(),
    ],
)
def test_actions_need_an_open_contact(book, action):
    with pytest.raises(ContactNotFoundError):
        action(book)
    assert book.current is None
    assert book.visible_contacts() == []
    assert book.count_text() == "0 Contacts"


def test_supplied_manager_is_used_without_loading(tmp_path):
    path = tmp_path / "contacts.txt"
    path.write_text("Ann,1,ann@example.com,0\n")
    manager = ContactManager()
    manager.add("Zed", "9", "zed@example.com")
    book = ContactBook(path, manager=manager)
    assert [c.name for c in book.visible_contacts()] == ["Zed"]