"""Application state behind the contact book screens: list filtering and edits."""

from __future__ import annotations

from pathlib import Path

from .contact import Contact
from .manager import ContactManager, ContactNotFoundError
from .storage import DEFAULT_PATH, PathLike, load, save

AVATAR_COLORS = (
    "#5e5ce6",
    "#0a84ff",
    "#30d158",
    "#ff9f0a",
    "#bf5af2",
    "#ff453a",
    "#64d2ff",
    "#ff6b6b",
)


def initials(name: str) -> str:
    """Return the upper-cased first letters of the first two words of ``name``."""
    parts = [part for part in name.strip().split(" ") if part]
    return "".join(part[0].upper() for part in parts[:2])


def avatar_color(name: str) -> str:
    """Pick the avatar background colour for ``name`` from a fixed palette.

    The choice depends on the sum of the name's UTF-16 code units.
    """
    encoded = name.encode("utf-16-le")
    total = sum(
        int.from_bytes(encoded[i : i + 2], "little")
        for i in range(0, len(encoded), 2)
    )
    return AVATAR_COLORS[total % len(AVATAR_COLORS)]


class ContactBook:
    """The contact list with its search text, favourites filter and open contact.

    Every change is written straight back to the contacts file.
    """

    def __init__(
        self,
        path: PathLike = DEFAULT_PATH,
        *,
        manager: ContactManager | None = None,
    ) -> None:
        self.path = Path(path)
        if manager is None:
            manager = ContactManager()
            load(manager, self.path)
        self.manager = manager
        self.search_text = ""
        self.show_favorites = False
        self.current: Contact | None = None

    def _require_current(self) -> Contact:
        if self.current is None:
            raise ContactNotFoundError("No contact is open")
        return self.current

    def visible_contacts(self) -> list[Contact]:
        """Contacts matching the search text, only favourites when so filtered."""
        results = self.manager.search(self.search_text)
        if self.show_favorites:
            return [contact for contact in results if contact.favorite]
        return results

    def count_text(self) -> str:
        """The label telling how many contacts are listed."""
        return f"{len(self.visible_contacts())} Contacts"

    def add(self, name: str, phone_number: str, email: str) -> Contact:
        """Create a contact, save the book and return the new contact."""
        contact = self.manager.add(name, phone_number, email)
        self.save()
        return contact

    def open(self, contact: Contact) -> Contact:
        """Make ``contact`` the one being viewed and save the book."""
        self.current = contact
        self.save()
        return contact

    def toggle_favorite(self) -> bool:
        """Flip the open contact's favourite flag, save, and return the new flag."""
        contact = self._require_current()
        flag = contact.toggle_favorite()
        self.save()
        return flag

    def rename(self, name: str) -> Contact:
        """Rename the open contact, save, and return it."""
        contact = self._require_current()
        self.manager.rename(contact.name, name)
        self.current = self.manager.get(name)
        self.current.name = name
        self.save()
        return self.current

    def set_email(self, email: str) -> None:
        """Change the open contact's e-mail address and save."""
        self._require_current().email = email
        self.save()

    def set_phone_number(self, phone_number: str) -> None:
        """Change the open contact's phone number and save."""
        self._require_current().phone_number = phone_number
        self.save()

    def delete(self) -> None:
        """Remove the open contact, save, and close it."""
        contact = self._require_current()
        self.manager.delete(contact.name)
        self.save()
        self.current = None

    def save(self) -> None:
        """Write all contacts to the book's file."""
        save(self.manager, self.path)