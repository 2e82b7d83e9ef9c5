"""Contact records: phone numbers, e-mail addresses and the contact itself."""

from __future__ import annotations

from dataclasses import dataclass, field

PHONE_MAX_LEN = 29
EMAIL_MAX_LEN = 63
NAME_MAX_LEN = 63
GIVEN_NAME_MAX_LEN = 31
FAMILY_NAME_MAX_LEN = 31
ACCOUNT_NAME_MAX_LEN = 63
ACCOUNT_TYPE_MAX_LEN = 31
NOTE_MAX_LEN = 127

PHONE_TYPE_MOBILE = 1
EMAIL_TYPE_PERSONAL = 1


def _clip(text: str, limit: int) -> str:
    return text[:limit]


@dataclass
class Phone:
    """A phone number with a numeric type tag."""

    number: str = ""
    type: int = 0

    def __post_init__(self) -> None:
        self.number = _clip(self.number, PHONE_MAX_LEN)


@dataclass
class Email:
    """An e-mail address with a numeric type tag."""

    address: str = ""
    type: int = 0

    def __post_init__(self) -> None:
        self.address = _clip(self.address, EMAIL_MAX_LEN)


@dataclass
class Contact:
    """A single entry of the contact book."""

    display_name: str = ""
    note: str = ""
    phones: list[Phone] = field(default_factory=list)
    emails: list[Email] = field(default_factory=list)
    given_name: str = ""
    family_name: str = ""
    account_name: str = ""
    account_type: str = ""
    contact_id: int = 0

    def __post_init__(self) -> None:
        self.display_name = _clip(self.display_name, NAME_MAX_LEN)
        self.note = _clip(self.note, NOTE_MAX_LEN)
        self.given_name = _clip(self.given_name, GIVEN_NAME_MAX_LEN)
        self.family_name = _clip(self.family_name, FAMILY_NAME_MAX_LEN)
        self.account_name = _clip(self.account_name, ACCOUNT_NAME_MAX_LEN)
        self.account_type = _clip(self.account_type, ACCOUNT_TYPE_MAX_LEN)

    def add_phone(self, number: str) -> Phone:
        """Append a mobile phone number and return it."""
        phone = Phone(number, PHONE_TYPE_MOBILE)
        self.phones.append(phone)
        return phone

    def add_email(self, address: str) -> Email:
        """Append a personal e-mail address and return it."""
        email = Email(address, EMAIL_TYPE_PERSONAL)
        self.emails.append(email)
        return email

    def matches(self, keyword: str) -> bool:
        """True if the keyword occurs in the name or in any phone number."""
        if keyword in self.display_name:
            return True
        return any(keyword in phone.number for phone in self.phones)