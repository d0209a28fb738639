from contactbook.contact import Contact
from contactbook.manager import ContactManager
from contactbook.storage import load, save


def build():
    m = ContactManager()
    m.add("Bea", "456", "bea@example.com")
    m.add("Ann", "123", "ann@example.com")
    m.get("Ann").favorite = True
    return m


def test_save_writes_one_line_per_contact(tmp_path):
    path = tmp_path / "contacts.txt"
    save(build(), path)
    assert path.read_text(encoding="utf-8") == (
        "Ann,123,ann@example.com,1\nBea,456,bea@example.com,0\n"
    )


def test_round_trip(tmp_path):
    path = tmp_path / "contacts.txt"
    original = build()
    save(original, path)
    restored = ContactManager()
    load(restored, path)
    assert restored.all() == original.all()


def test_load_missing_file_adds_nothing(tmp_path):
    m = ContactManager()
    load(m, tmp_path / "absent.txt")
    assert len(m) == 0


def test_load_short_lines_fill_empty_fields(tmp_path):
    path = tmp_path / "contacts.txt"
    path.write_text("Ann,123\nBea\n", encoding="utf-8")
    m = ContactManager()
    load(m, path)
    assert m.get("Ann") == Contact("Ann", "123", "")
    assert m.get("Bea") == Contact("Bea", "", "")


def test_load_favorite_flag_only_one_counts(tmp_path):
    path = tmp_path / "contacts.txt"
    path.write_text(
        "Ann,1,ann@example.com,1\nBea,2,bea@example.com,yes\n", encoding="utf-8"
    )
    m = ContactManager()
    load(m, path)
    assert m.get("Ann").favorite is True
    assert m.get("Bea").favorite is False


def test_load_ignores_extra_fields(tmp_path):
    path = tmp_path / "contacts.txt"
    path.write_text("Ann,1,ann@example.com,1,extra\n", encoding="utf-8")
    m = ContactManager()
    load(m, path)
    assert m.get("Ann") == Contact("Ann", "1", "ann@example.com", True)


def test_load_merges_into_existing(tmp_path):
    path = tmp_path / "contacts.txt"
    path.write_text("ann,9,new@example.com,0\n", encoding="utf-8")
    m = build()
    load(m, path)
    assert len(m) == 2
    assert m.get("Ann") == Contact("ann", "9", "new@example.com", False)


def test_save_empty_manager_writes_empty_file(tmp_path):
    path = tmp_path / "contacts.txt"
    save(ContactManager(), path)
    assert path.read_text(encoding="utf-8") == ""