"""An ordered collection of contacts."""

from __future__ import annotations

from collections.abc import Iterator

from .models import Contact


class ContactNotFoundError(LookupError):
    """Raised when no contact has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no contact named {name!r}")
        self.name = name


class ContactBook:
    """Contacts kept in insertion order."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def add(self, contact: Contact) -> Contact:
        """Append a contact to the end of the book and return it."""
        self._contacts.append(contact)
        return contact

    def find_by_name(self, name: str) -> Contact:
        """Return the first contact whose display name equals ``name``."""
        for contact in self._contacts:
            if contact.display_name == name:
                return contact
        raise ContactNotFoundError(name)

    def remove_by_name(self, name: str) -> Contact:
        """Remove and return the first contact whose display name equals ``name``."""
        contact = self.find_by_name(name)
        self._contacts.remove(contact)
        return contact

    def search(self, keyword: str) -> list[Contact]:
        """Return contacts whose name or any phone number contains ``keyword``."""
        return [contact for contact in self._contacts if contact.matches(keyword)]

    def clear(self) -> None:
        """Remove every contact."""
        self._contacts.clear()

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)