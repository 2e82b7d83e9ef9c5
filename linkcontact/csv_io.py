"""Reading and writing the contact book as CSV."""

from __future__ import annotations

import os
import re

from .book import ContactBook
from .models import Contact, Email, Phone

HEADER = "姓名,手机号码,email,备注"
BOM = "\ufeff"
_JOINED_MAX_LEN = 999
_LINE_END = re.compile(r"[\r\n]")


class EmptyCsvError(ValueError):
    """Raised when a CSV file to import has no header line."""


def format_row(contact: Contact) -> str:
    """Render a contact as one CSV line, without the line terminator."""
    phones = "/".join(p.number for p in contact.phones)[:_JOINED_MAX_LEN]
    emails = "/".join(e.address for e in contact.emails)[:_JOINED_MAX_LEN]
    return f"{contact.display_name},{phones},{emails},{contact.note}"


def parse_row(line: str) -> Contact | None:
    """Build a contact from a CSV line, or return None if it has no name.

    Empty fields are skipped, so the remaining fields shift left; at most
    one phone number and one e-mail address are taken.
    """
    line = _LINE_END.split(line, maxsplit=1)[0]
    fields = [part for part in line.split(",") if part]
    name, phone, email, note = (fields + [""] * 4)[:4]
    if not name:
        return None
    contact = Contact(name, note=note)
    if phone:
        contact.phones.append(Phone(phone))
    if email:
        contact.emails.append(Email(email))
    return contact


def export_csv(book: ContactBook, path: str | os.PathLike[str]) -> None:
    """Write every contact to ``path`` as UTF-8 CSV with a byte-order mark."""
    with open(path, "w", encoding="utf-8", newline="") as fp:
        fp.write(BOM)
        fp.write(HEADER + "\n")
        for contact in book:
            fp.write(format_row(contact) + "\n")


def import_csv(book: ContactBook, path: str | os.PathLike[str]) -> int:
    """Append the contacts in ``path`` to ``book`` and return how many were added.

    The first line is taken as the header and skipped.
    """
    with open(path, "r", encoding="utf-8-sig", newline="") as fp:
        text = fp.read()
    if not text:
        raise EmptyCsvError(f"{os.fspath(path)} is empty")
    _header, *rows = text.split("\n")
    imported = 0
    for row in rows:
        contact = parse_row(row)
        if contact is None:
            continue
        book.add(contact)
        imported += 1
    return imported