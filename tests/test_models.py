from linkcontact.models import (
    EMAIL_MAX_LEN,
    EMAIL_TYPE_PERSONAL,
    NAME_MAX_LEN,
    NOTE_MAX_LEN,
    PHONE_MAX_LEN,
    PHONE_TYPE_MOBILE,
    Contact,
    Email,
    Phone,
)


def test_add_phone_appends_in_order_with_mobile_type():
    contact = Contact("Alice")
    first = contact.add_phone("1001")
    second = contact.add_phone("1002")
    assert [p.number for p in contact.phones] == ["1001", "1002"]
    assert first.type == PHONE_TYPE_MOBILE
    assert second is contact.phones[-1]


def test_add_email_appends_with_personal_type():
    contact = Contact("Alice")
    email = contact.add_email("alice@example.com")
    assert contact.emails == [Email("alice@example.com", EMAIL_TYPE_PERSONAL)]
    assert email.type == EMAIL_TYPE_PERSONAL


def test_new_records_default_to_type_zero():
    assert Phone("1001").type == 0
    assert Email("a@example.com").type == 0


def test_matches_name_substring():
    contact = Contact("Alice Smith")
    assert contact.matches("Smi")
    assert not contact.matches("Bob")


def test_matches_phone_substring():
    contact = Contact("Alice")
    contact.add_phone("13900001111")
    assert contact.matches("0000")
    assert not contact.matches("9999")


def test_matches_does_not_look_at_email_or_note():
    contact = Contact("Alice", note="colleague")
    contact.add_email("bob@example.com")
    assert not contact.matches("bob")
    assert not contact.matches("colleague")


def test_empty_keyword_matches_everything():
    assert Contact("").matches("")


def test_fields_are_clipped_to_their_limits():
    contact = Contact("n" * 200, note="x" * 300)
    assert len(contact.display_name) == NAME_MAX_LEN
    assert len(contact.note) == NOTE_MAX_LEN
    assert len(contact.add_phone("1" * 50).number) == PHONE_MAX_LEN
    assert len(contact.add_email("e" * 100).address) == EMAIL_MAX_LEN


def test_new_contacts_do_not_share_lists():
    a = Contact("A")
    b = Contact("B")
    a.add_phone("1")
    assert b.phones == []