"""A single entry in the contact book."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Contact:
    """A person with a phone number, an e-mail address and a favourite flag."""

    name: str = ""
    phone_number: str = ""
    email: str = ""
    favorite: bool = False

    def display(self) -> str:
        """Write the contact's details to stdout, one field per line, and return that text."""
        text = (
            f"Name: {self.name}\n"
            f"Phone Number: {self.phone_number}\n"
            f"Email: {self.email}\n"
        )
        sys.stdout.write(text)
        return text

    def update(self, name: str, phone_number: str, email: str) -> None:
        """Replace name, phone number and e-mail at once; the favourite flag is kept."""
        self.name = name
        self.phone_number = phone_number
        self.email = email

    def toggle_favorite(self) -> bool:
        """Flip the favourite flag and return its new value."""
        self.favorite = not self.favorite
        return self.favorite