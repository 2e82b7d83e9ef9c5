import io

import pytest

from linkcontact.book import ContactBook
from linkcontact.cli import EXPORT_PATH, Menu, main
from linkcontact.models import Contact


def make_menu(text, book=None):
    book = book if book is not None else ContactBook()
    out = io.StringIO()
    return Menu(book, io.StringIO(text), out), book, out


def sample_book():
    book = ContactBook()
    alice = Contact("Alice", note="friend")
    alice.add_phone("12345")
    alice.add_phone("67890")
    alice.add_email("alice@example.com")
    book.add(alice)
    bob = Contact("Bob", note="work")
    bob.add_phone("55555")
    book.add(bob)
    return book


def test_run_adds_contact_with_several_phones():
    text = "1\nAlice\nfriend\n12345\ny\n67890\nn\nalice@example.com\nn\n0\n"
    menu, book, out = make_menu(text)
    menu.run()
    contacts = list(book)
    assert len(contacts) == 1
    assert contacts[0].display_name == "Alice"
    assert contacts[0].note == "friend"
    assert [p.number for p in contacts[0].phones] == ["12345", "67890"]
    assert [e.address for e in contacts[0].emails] == ["alice@example.com"]
    assert "LinkList Contact v0.0.1" in out.getvalue()


def test_add_contact_clips_long_name():
    long_name = "x" * 80
    menu, book, _ = make_menu(f"{long_name}\nnote\n1\nn\nz@example.com\nn\n")
    menu.add_contact()
    contact = next(iter(book))
    assert contact.display_name == long_name[:63]


def test_invalid_selection_is_reported():
    menu, _, out = make_menu("9\nabc\n0\n")
    menu.run()
    assert out.getvalue().count("请输入有效字符！") == 2


def test_run_stops_at_end_of_input():
    menu, book, out = make_menu("5\n")
    menu.run()
    assert "当前没有任何联系人。" in out.getvalue()
    assert len(book) == 0


def test_delete_existing_contact():
    menu, book, out = make_menu("Alice\n", sample_book())
    menu.delete_contact()
    assert [c.display_name for c in book] == ["Bob"]
    assert '联系人 "Alice" 已成功删除。' in out.getvalue()


def test_delete_missing_contact():
    menu, book, out = make_menu("Carol\n", sample_book())
    menu.delete_contact()
    assert len(book) == 2
    assert '未找到名为 "Carol" 的联系人。' in out.getvalue()


def test_search_by_phone_fragment():
    menu, _, out = make_menu("678\n", sample_book())
    found = menu.search_contact()
    assert [c.display_name for c in found] == ["Alice"]
    text = out.getvalue()
    assert "匹配到联系人 #1" in text
    assert "  - 67890" in text
    assert "  - alice@example.com" in text


def test_search_without_match():
    menu, _, out = make_menu("zzz\n", sample_book())
    assert menu.search_contact() == []
    assert '未找到包含 "zzz" 的联系人。' in out.getvalue()


def test_modify_name():
    menu, book, out = make_menu("Alice\n1\nAlicia\n0\n", sample_book())
    menu.modify_contact()
    assert [c.display_name for c in book] == ["Alicia", "Bob"]
    assert "姓名已更新为: Alicia" in out.getvalue()


def test_modify_second_phone():
    menu, book, _ = make_menu("Alice\n2\n2\n11111\n0\n", sample_book())
    menu.modify_contact()
    alice = book.find_by_name("Alice")
    assert [p.number for p in alice.phones] == ["12345", "11111"]


def test_modify_phone_index_zero_picks_first():
    menu, book, _ = make_menu("Alice\n2\n0\n22222\n0\n", sample_book())
    menu.modify_contact()
    alice = book.find_by_name("Alice")
    assert [p.number for p in alice.phones] == ["22222", "67890"]


def test_modify_phone_invalid_index():
    menu, book, out = make_menu("Alice\n2\n7\n0\n", sample_book())
    menu.modify_contact()
    assert "无效编号。" in out.getvalue()
    assert [p.number for p in book.find_by_name("Alice").phones] == ["12345", "67890"]


def test_modify_email():
    menu, book, _ = make_menu("Alice\n3\n1\nnew@example.com\n0\n", sample_book())
    menu.modify_contact()
    assert [e.address for e in book.find_by_name("Alice").emails] == ["new@example.com"]


def test_modify_email_when_none():
    menu, _, out = make_menu("Bob\n3\n0\n", sample_book())
    menu.modify_contact()
    assert "该联系人没有邮箱地址。" in out.getvalue()


def test_modify_missing_contact():
    menu, _, out = make_menu("Nobody\n", sample_book())
    menu.modify_contact()
    assert '未找到名为 "Nobody" 的联系人。' in out.getvalue()


def test_print_all_lists_every_contact():
    menu, _, out = make_menu("", sample_book())
    menu.print_all()
    text = out.getvalue()
    assert "显示名: Alice" in text
    assert "电话2: 67890 " in text
    assert "邮箱1: alice@example.com " in text
    assert text.index("显示名: Alice") < text.index("显示名: Bob")


def test_export_then_import_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    menu, _, out = make_menu("", sample_book())
    menu.export_contacts()
    assert (tmp_path / EXPORT_PATH).exists()
    assert f"通讯录已导出至{EXPORT_PATH}" in out.getvalue()

    target, book, out2 = make_menu(f"{EXPORT_PATH}\n")
    assert target.import_contacts() == 2
    assert [c.display_name for c in book] == ["Alice", "Bob"]
    assert "已导入 2 条联系人" in out2.getvalue()


def test_import_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    menu, book, out = make_menu("missing.csv\n")
    assert menu.import_contacts() == 0
    assert len(book) == 0
    assert "missing.csv" in out.getvalue()


def test_main_quits_on_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "[0] 退出程序" in capsys.readouterr().out


def test_main_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "v0.0.1" in capsys.readouterr().out