"""Saving and loading contacts as comma-separated lines of text."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .manager import ContactManager

DEFAULT_PATH = "contacts.txt"

PathLike = Union[str, "os.PathLike[str]"]


def save(manager: ContactManager, path: PathLike = DEFAULT_PATH) -> None:
    """Write every contact as ``name,phone,email,flag`` with flag 1 or 0."""
    with open(path, "w", encoding="utf-8") as file:
        for contact in manager:
            flag = "1" if contact.favorite else "0"
            file.write(
                f"{contact.name},{contact.phone_number},{contact.email},{flag}\n"
            )


def load(manager: ContactManager, path: PathLike = DEFAULT_PATH) -> None:
    """Add the contacts stored at ``path`` to ``manager``.

    A missing file adds nothing. Missing fields are read as empty; a present
    favourite field marks the contact a favourite only when it is ``1``.
    """
    source = Path(path)
    if not source.is_file():
        return
    with open(source, encoding="utf-8") as file:
        for raw in file:
            line = raw.rstrip("\n")
            fields = line.split(",")
            fields += [""] * (4 - len(fields))
            name, phone, email, favorite = fields[:4]
            contact = manager.add(name, phone, email)
            if favorite:
                contact.favorite = favorite == "1"