# contactbook

A small desktop contact list. Keep names, phone numbers and e-mail
addresses, mark the people you reach most often as favorites, and find
anyone by typing the first letters of their name.

## Installing

```
pip install .
```

The window is drawn with Tkinter from the standard library. Nothing else
is installed, but your Python must have Tk support.

## Running

```
contactbook
contactbook --file path/to/contacts.txt
```

Without `--file`, contacts are read from and written to `contacts.txt`
in the current directory. If the file does not exist yet, the list starts
out empty and the file is created on the first change.

The main window lists every contact in name order. Each card shows a
coloured circle with the person's initials (the first letters of the
first two words of the name), the name, the e-mail address, the phone
number and a star for favorites. From there you can:

- type in the search bar to show only contacts whose name starts with
  what you typed; the letters A to Z match in either case;
- tick **Show Favorites** to narrow the list to starred contacts;
- press **Add Contact** to open the new-contact form;
- click a card to open the contact, then change its e-mail, phone number
  or name, star or unstar it with **Favorite**, delete it, or return to
  the list.

Every change is saved to the contacts file straight away.

## The contacts file

One contact per line, fields separated by commas:

```
Ada Lovelace,012345,ada@example.com,1
```

The fields are name, phone number, e-mail address and a favorite flag
(`1` for a favorite, `0` otherwise). When loading, missing fields are
read as empty. Fields are not quoted, so a comma inside a name, number
or address splits the line differently when it is read back.

Names are unique without regard to letter case: adding a contact under a
name that already exists replaces the existing one, and renaming a
contact to a name that is taken replaces the contact that held it.

## Using it from Python

```python
from contactbook.manager import ContactManager
from contactbook import storage

book = ContactManager()
book.add("Ada Lovelace", "012345", "ada@example.com")
book.get("ada lovelace").toggle_favorite()

for contact in book.search("ad"):
    contact.display()

storage.save(book, "contacts.txt")

restored = ContactManager()
storage.load(restored, "contacts.txt")
```

- `contactbook.contact.Contact` is a dataclass with `name`,
  `phone_number`, `email` and `favorite`. `display()` prints the details
  and returns the printed text; `update()` replaces name, phone and
  e-mail together; `toggle_favorite()` flips the flag and returns it.
- `contactbook.manager.ContactManager` supports `add`, `search`,
  `delete`, `rename`, `get`, `all` (copies of every contact), `len()`,
  `in` and iteration in name order. `get` raises `ContactNotFoundError`
  for an unknown name; `delete` and `rename` ignore unknown names.
- `contactbook.storage.save` and `load` write and read the file format
  above; `load` adds nothing when the file is missing.
- `contactbook.controller.ContactBook` ties a manager to a contacts file
  and holds the search text, the favorites filter and the open contact.
  It saves after every change, the way the window does. Editing calls on
  it raise `ContactNotFoundError` when no contact is open.
  `initials()` and `avatar_color()` give the text and colour of a
  contact's avatar.

## Tests

```
pip install ".[test]"
pytest
```