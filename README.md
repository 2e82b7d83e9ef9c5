# linkcontact

linkcontact is an address book that runs in the terminal. Each contact can have several phone numbers and e-mail addresses. You can search contacts, change them, and move them into and out of CSV files. The menu prompts are in Chinese.

## Install

```
pip install .
```

## Interactive use

```
linkcontact
linkcontact --version
```

The first command opens a numbered menu:

- `1` add a contact. You give a name and a note, then one or more phone numbers, then one or more e-mail addresses. After each number or address, answer `y` to add another.
- `2` delete the first contact with exactly the name you give
- `3` change a contact you name exactly: its name, one of its phone numbers or one of its e-mail addresses, picked by their listed number
- `4` search by part of a name or part of a phone number
- `5` list every contact
- `6` export the book to `contacts.csv` in the current directory
- `7` import contacts from a CSV file you name
- `0` quit

The menu ends when you choose `0` or when input runs out.

Input is read one whitespace-separated word at a time, so a name, note, number or address you type cannot contain spaces. Values are cut to fixed lengths:

- names: 63 characters
- notes: 127 characters
- phone numbers: 29 characters
- e-mail addresses: 63 characters

## CSV format

`export_csv` writes a file in this layout:

- a UTF-8 byte order mark, then the header row `姓名,手机号码,email,备注`
- one row per contact with four columns: name, phone numbers, e-mail addresses, note
- several numbers or addresses in one column are joined with `/`

`import_csv` reads files in this layout:

- It skips the first line as the header.
- A row whose name is missing is skipped.
- Empty fields are dropped before the columns are assigned, so the fields after an empty one move one column to the left.
- Each contact gets at most one phone number and one e-mail address. A column joined with `/` is kept as a single value and cut to the length limit.

`import_csv` raises `EmptyCsvError` when the file is empty. The interactive menu reports an empty file, or a file it cannot open, and carries on.

## Library use

```python
from linkcontact.models import Contact
from linkcontact.book import ContactBook
from linkcontact.csv_io import export_csv, import_csv, format_row, parse_row

book = ContactBook()
alice = Contact(display_name="Alice", note="work")
alice.add_phone("12345")
alice.add_email("alice@example.com")
book.add(alice)

for match in book.search("123"):
    print(match.display_name)

print(format_row(alice))          # Alice,12345,alice@example.com,work
print(parse_row("Bob,678,,friend").note)

export_csv(book, "contacts.csv")

other = ContactBook()
count = import_csv(other, "contacts.csv")
print(count, len(other))
```

The modules are:

- `linkcontact.models` holds the `Phone`, `Email` and `Contact` dataclasses. `Contact.add_phone` and `Contact.add_email` append entries, and `Contact.matches` checks a keyword against the name and phone numbers.
- `linkcontact.book` holds `ContactBook`, which keeps contacts in insertion order. It provides `add`, `find_by_name`, `remove_by_name`, `search`, `clear`, `len()` and iteration. `find_by_name` and `remove_by_name` raise `ContactNotFoundError` when no contact has that exact name.
- `linkcontact.csv_io` holds `format_row`, `parse_row`, `export_csv` and `import_csv`.
- `linkcontact.cli` holds `Menu`, the interactive menu. It takes a `ContactBook` and optional input and output text streams. `linkcontact.cli` also holds `main`, which is the `linkcontact` command.

## What it does not do

Contacts are held in memory only. Nothing is saved when the program exits unless you export to CSV first, and nothing is loaded at start-up unless you import. The `given_name`, `family_name`, `account_name`, `account_type` and `contact_id` fields of `Contact` are not shown in the menu and not written to CSV.

## Tests

```
pip install .[test]
pytest
```