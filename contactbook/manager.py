"""An ordered, case-insensitive collection of contacts keyed by name."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from .contact import Contact

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _fold(name: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as it is."""
    return name.translate(_ASCII_FOLD)


class ContactNotFoundError(LookupError):
    """Raised when no contact has the requested name."""


class ContactManager:
    """Contacts keyed by name, compared without regard to ASCII letter case.

    Iteration, listing and searching follow the order of the case-folded names.
    """

    def __init__(self) -> None:
        self._contacts: dict[str, Contact] = {}

    def _ordered(self) -> list[tuple[str, Contact]]:
        return sorted(self._contacts.items())

    def add(self, name: str, phone_number: str, email: str) -> Contact:
        """Store a new contact, replacing any contact whose name matches."""
        contact = Contact(name, phone_number, email)
        self._contacts[_fold(name)] = contact
        return contact

    def search(self, prefix: str) -> list[Contact]:
        """Return the contacts whose name starts with ``prefix``, ignoring case."""
        wanted = _fold(prefix)
        return [
            contact
            for key, contact in self._ordered()
            if key.startswith(wanted)
        ]

    def delete(self, name: str) -> None:
        """Remove the contact with this name; a missing name is ignored."""
        self._contacts.pop(_fold(name), None)

    def rename(self, current_name: str, name: str) -> None:
        """Give a contact a new name, keeping its other details.

        A contact already holding the new name is replaced. Nothing happens
        when no contact is called ``current_name``.
        """
        contact = self._contacts.pop(_fold(current_name), None)
        if contact is None:
            return
        contact.name = name
        self._contacts[_fold(name)] = contact

    def get(self, name: str) -> Contact:
        """Return the stored contact with this name."""
        try:
            return self._contacts[_fold(name)]
        except KeyError:
            raise ContactNotFoundError("Contact not found") from None

    def all(self) -> list[Contact]:
        """Return copies of every contact, in name order."""
        return [replace(contact) for _, contact in self._ordered()]

    def __iter__(self) -> Iterator[Contact]:
        return (contact for _, contact in self._ordered())

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _fold(name) in self._contacts