"""A desktop window for browsing, searching and editing the contact book."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from .contact import Contact
from .controller import ContactBook, avatar_color, initials
from .storage import DEFAULT_PATH

FAVORITE_TEXT = "⭐  Favorite"

_BACKGROUND = "#1c1c1e"
_CARD = "#2c2c2e"
_CARD_BORDER = "#3a3a3c"
_FIELD = "#3a3a3c"
_TEXT = "#ffffff"
_MUTED = "#8e8e93"
_DIM = "#636366"
_ACCENT = "#0a84ff"
_DANGER = "#ff453a"
_STAR = "#ffd60a"


def favorite_text(contact: Contact) -> str:
    """The banner shown under an open contact's name."""
    return FAVORITE_TEXT if contact.favorite else ""


def card_lines(contact: Contact) -> list[str]:
    """The lines of text on a contact's card in the list: name, e-mail, phone."""
    return [contact.name, contact.email, contact.phone_number]


class ContactsApp:
    """The contacts window with its list, new-contact and contact pages."""

    def __init__(self, book: ContactBook | None = None) -> None:
        import tkinter as tk

        self._tk = tk
        self.book = book if book is not None else ContactBook()

        self.root = tk.Tk()
        self.root.title("Contacts")
        self.root.geometry("420x660")
        self.root.minsize(360, 500)
        self.root.configure(bg=_BACKGROUND)

        self.search_var = tk.StringVar(master=self.root)
        self.favorites_var = tk.BooleanVar(master=self.root, value=False)

        self.list_page = self._build_list_page()
        self.add_page = self._build_add_page()
        self.contact_page = self._build_contact_page()

        self.search_var.trace_add("write", lambda *_: self.refresh())

    # -- widget helpers -------------------------------------------------

    def _button(
        self,
        parent: Any,
        text: str,
        command: Callable[[], None],
        *,
        bg: str = _ACCENT,
        fg: str = _TEXT,
    ) -> Any:
        return self._tk.Button(
            parent,
            text=text,
            command=command,
            bg=bg,
            fg=fg,
            activebackground=bg,
            activeforeground=fg,
            relief="flat",
            cursor="hand2",
            padx=12,
            pady=8,
        )

    def _entry(self, parent: Any) -> Any:
        return self._tk.Entry(
            parent,
            bg=_FIELD,
            fg=_TEXT,
            insertbackground=_TEXT,
            relief="flat",
            highlightthickness=1,
            highlightbackground=_CARD_BORDER,
            highlightcolor=_ACCENT,
        )

    def _draw_avatar(self, canvas: Any, name: str, size: int) -> None:
        canvas.delete("all")
        canvas.create_oval(0, 0, size, size, fill=avatar_color(name), outline="")
        canvas.create_text(
            size // 2,
            size // 2,
            text=initials(name),
            fill=_TEXT,
            font=("TkDefaultFont", -(size * 11 // 32), "bold"),
        )

    # -- page construction ----------------------------------------------

    def _build_list_page(self) -> Any:
        tk = self._tk
        page = tk.Frame(self.root, bg=_BACKGROUND)

        header = tk.Frame(page, bg=_BACKGROUND, height=64)
        header.pack(fill="x")
        header.pack_propagate(False)
        tk.Label(
            header,
            text="Contacts",
            bg=_BACKGROUND,
            fg=_TEXT,
            font=("TkDefaultFont", 18, "bold"),
        ).pack(side="left", padx=20)
        self.count_label = tk.Label(header, bg=_BACKGROUND, fg=_DIM)
        self.count_label.pack(side="right", padx=20)

        search_row = tk.Frame(page, bg=_BACKGROUND)
        search_row.pack(fill="x", padx=16, pady=10)
        search = self._entry(search_row)
        search.configure(textvariable=self.search_var)
        search.pack(fill="x", ipady=8)

        bottom = tk.Frame(page, bg=_BACKGROUND, height=72)
        bottom.pack(side="bottom", fill="x")
        bottom.pack_propagate(False)
        tk.Checkbutton(
            bottom,
            text="Show Favorites",
            variable=self.favorites_var,
            command=self.refresh,
            bg=_BACKGROUND,
            fg=_MUTED,
            selectcolor=_CARD,
            activebackground=_BACKGROUND,
            activeforeground=_MUTED,
        ).pack(side="left", padx=20)
        self._button(bottom, "  ＋  Add Contact", self.show_add).pack(
            side="right", padx=20
        )

        body = tk.Frame(page, bg=_BACKGROUND)
        body.pack(fill="both", expand=True)
        canvas = tk.Canvas(body, bg=_BACKGROUND, highlightthickness=0)
        scrollbar = tk.Scrollbar(body, orient="vertical", command=canvas.yview)
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        canvas.pack(side="left", fill="both", expand=True)

        self.list_frame = tk.Frame(canvas, bg=_BACKGROUND)
        window_id = canvas.create_window((0, 0), window=self.list_frame, anchor="nw")
        self.list_frame.bind(
            "<Configure>",
            lambda _event: canvas.configure(scrollregion=canvas.bbox("all")),
        )
        canvas.bind(
            "<Configure>",
            lambda event: canvas.itemconfigure(window_id, width=event.width),
        )
        return page

    def _build_add_page(self) -> Any:
        tk = self._tk
        page = tk.Frame(self.root, bg=_BACKGROUND, padx=28, pady=32)

        tk.Label(
            page,
            text="Create New Contact",
            bg=_BACKGROUND,
            fg=_TEXT,
            font=("TkDefaultFont", 16, "bold"),
        ).pack(pady=(0, 14))

        self.new_fields: dict[str, Any] = {}
        for key, caption in (
            ("name", "Full Name"),
            ("email", "Primary Email"),
            ("phone", "Mobile Phone"),
        ):
            tk.Label(page, text=caption, bg=_BACKGROUND, fg=_MUTED, anchor="w").pack(
                fill="x"
            )
            entry = self._entry(page)
            entry.pack(fill="x", ipady=10, pady=(2, 12))
            self.new_fields[key] = entry

        buttons = tk.Frame(page, bg=_BACKGROUND)
        buttons.pack(side="bottom", fill="x")
        self._button(buttons, "Cancel", self.show_list, bg=_CARD, fg=_MUTED).pack(
            side="left", fill="x", expand=True, padx=(0, 6)
        )
        self._button(buttons, "Create Contact", self._create_contact).pack(
            side="left", fill="x", expand=True, padx=(6, 0)
        )
        return page

    def _build_contact_page(self) -> Any:
        tk = self._tk
        page = tk.Frame(self.root, bg=_BACKGROUND)

        profile = tk.Frame(page, bg=_CARD, height=190)
        profile.pack(fill="x")
        profile.pack_propagate(False)
        self.avatar_canvas = tk.Canvas(
            profile, width=84, height=84, bg=_CARD, highlightthickness=0
        )
        self.avatar_canvas.pack(pady=(24, 8))
        self.name_label = tk.Label(
            profile, bg=_CARD, fg=_TEXT, font=("TkDefaultFont", 18, "bold")
        )
        self.name_label.pack()
        self.favorite_label = tk.Label(profile, bg=_CARD, fg=_STAR)
        self.favorite_label.pack()

        actions = tk.Frame(page, bg=_BACKGROUND, height=72)
        actions.pack(side="bottom", fill="x")
        actions.pack_propagate(False)
        self._button(actions, "Return", self.show_list, bg=_CARD, fg=_MUTED).pack(
            side="left", fill="x", expand=True, padx=(16, 5), pady=12
        )
        self._button(actions, "Delete", self._delete_contact, bg=_DANGER).pack(
            side="left", fill="x", expand=True, padx=5, pady=12
        )
        self._button(
            actions, FAVORITE_TEXT, self._toggle_favorite, bg=_CARD, fg=_STAR
        ).pack(side="left", fill="x", expand=True, padx=(5, 16), pady=12)

        cards = tk.Frame(page, bg=_BACKGROUND, padx=16, pady=16)
        cards.pack(fill="both", expand=True)
        self.email_value, self.email_entry = self._edit_card(
            cards, "EMAIL", self._save_email, show_value=True
        )
        self.phone_value, self.phone_entry = self._edit_card(
            cards, "PHONE", self._save_phone, show_value=True
        )
        _, self.rename_entry = self._edit_card(
            cards, "CHANGE NAME", self._save_name, show_value=False
        )
        return page

    def _edit_card(
        self,
        parent: Any,
        title: str,
        on_save: Callable[[], None],
        *,
        show_value: bool,
    ) -> tuple[Any, Any]:
        tk = self._tk
        card = tk.Frame(parent, bg=_CARD, padx=16, pady=14)
        card.pack(fill="x", pady=5)
        tk.Label(
            card,
            text=title,
            bg=_CARD,
            fg=_DIM,
            font=("TkDefaultFont", 8, "bold"),
            anchor="w",
        ).pack(fill="x")
        value = None
        if show_value:
            value = tk.Label(card, bg=_CARD, fg=_TEXT, anchor="w")
            value.pack(fill="x", pady=(2, 6))
        row = tk.Frame(card, bg=_CARD)
        row.pack(fill="x")
        entry = self._entry(row)
        entry.pack(side="left", fill="x", expand=True, ipady=6, padx=(0, 8))
        self._button(row, "Save", on_save).pack(side="right")
        return value, entry

    def _add_card(self, contact: Contact) -> None:
        tk = self._tk
        card = tk.Frame(
            self.list_frame,
            bg=_CARD,
            padx=14,
            pady=14,
            highlightthickness=1,
            highlightbackground=_CARD_BORDER,
            cursor="hand2",
        )
        card.pack(fill="x", padx=12, pady=4)

        avatar = tk.Canvas(card, width=46, height=46, bg=_CARD, highlightthickness=0)
        self._draw_avatar(avatar, contact.name, 46)
        avatar.pack(side="left", padx=(0, 12))

        tk.Label(
            card,
            text="⭐" if contact.favorite else "",
            bg=_CARD,
            fg=_STAR,
        ).pack(side="right")

        text = tk.Frame(card, bg=_CARD)
        text.pack(side="left", fill="x", expand=True)
        name, email, phone = card_lines(contact)
        tk.Label(
            text, text=name, bg=_CARD, fg=_TEXT, font=("TkDefaultFont", 11, "bold"),
            anchor="w",
        ).pack(fill="x")
        for line in (email, phone):
            tk.Label(text, text=line, bg=_CARD, fg=_MUTED, anchor="w").pack(fill="x")

        def open_contact(_event: Any = None) -> None:
            self.show_contact(contact)

        self._bind_click(card, open_contact)

    def _bind_click(self, widget: Any, handler: Callable[[Any], None]) -> None:
        widget.bind("<Button-1>", handler)
        for child in widget.winfo_children():
            self._bind_click(child, handler)

    # -- page switching -------------------------------------------------

    def _show_page(self, page: Any, title: str) -> None:
        for other in (self.list_page, self.add_page, self.contact_page):
            other.pack_forget()
        page.pack(fill="both", expand=True)
        self.root.title(title)

    def refresh(self) -> None:
        """Rebuild the list of contact cards from the search text and filter."""
        self.book.search_text = self.search_var.get()
        self.book.show_favorites = bool(self.favorites_var.get())
        for child in self.list_frame.winfo_children():
            child.destroy()
        self.count_label.configure(text=self.book.count_text())
        for contact in self.book.visible_contacts():
            self._add_card(contact)

    def show_list(self) -> None:
        """Return to the refreshed list of contacts."""
        self.refresh()
        self._show_page(self.list_page, "Contacts")

    def show_add(self) -> None:
        """Show the form for a new contact."""
        self._show_page(self.add_page, "New Contact")

    def show_contact(self, contact: Contact) -> None:
        """Open ``contact`` in the detail page."""
        self.book.open(contact)
        for entry in (self.rename_entry, self.email_entry, self.phone_entry):
            entry.delete(0, "end")
        self.name_label.configure(text=contact.name)
        self.email_value.configure(text=contact.email)
        self.phone_value.configure(text=contact.phone_number)
        self.favorite_label.configure(text=favorite_text(contact))
        self._draw_avatar(self.avatar_canvas, contact.name, 84)
        self._show_page(self.contact_page, "Contact")

    # -- actions --------------------------------------------------------

    def _create_contact(self) -> None:
        fields = self.new_fields
        self.book.add(
            fields["name"].get(), fields["phone"].get(), fields["email"].get()
        )
        for entry in fields.values():
            entry.delete(0, "end")
        self.show_list()

    def _toggle_favorite(self) -> None:
        self.book.toggle_favorite()
        if self.book.current is not None:
            self.favorite_label.configure(text=favorite_text(self.book.current))

    def _save_name(self) -> None:
        contact = self.book.rename(self.rename_entry.get())
        self.show_contact(contact)

    def _save_email(self) -> None:
        self.book.set_email(self.email_entry.get())
        if self.book.current is not None:
            self.show_contact(self.book.current)

    def _save_phone(self) -> None:
        self.book.set_phone_number(self.phone_entry.get())
        if self.book.current is not None:
            self.show_contact(self.book.current)

    def _delete_contact(self) -> None:
        self.book.delete()
        self.show_list()

    def run(self) -> None:
        """Show the contact list and hand control to the window's event loop."""
        self.show_list()
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Start the contacts window."""
    parser = argparse.ArgumentParser(description="Browse and edit your contacts.")
    parser.add_argument(
        "--file",
        default=DEFAULT_PATH,
        help="contacts file to read and write (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    ContactsApp(ContactBook(args.file)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())