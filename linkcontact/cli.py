"""Interactive text menu for managing the contact book."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .book import ContactBook, ContactNotFoundError
from .csv_io import EmptyCsvError, export_csv, import_csv
from .models import EMAIL_MAX_LEN, NAME_MAX_LEN, NOTE_MAX_LEN, PHONE_MAX_LEN, Contact

VERSION = "v0.0.1"
EXPORT_PATH = "contacts.csv"
FILENAME_MAX_LEN = 99

TITLE = (
    "██╗     ██╗███╗   ██╗██╗  ██╗██╗     ██╗███████╗████████╗\n"
    "██║     ██║████╗  ██║██║ ██╔╝██║     ██║██╔════╝╚══██╔══╝\n"
    "██║     ██║██╔██╗ ██║█████╔╝ ██║     ██║███████╗   ██║   \n"
    "██║     ██║██║╚██╗██║██╔═██╗ ██║     ██║╚════██║   ██║   \n"
    "███████╗██║██║ ╚████║██║  ██╗███████╗██║███████║   ██║   \n"
    "╚══════╝╚═╝╚═╝  ╚═══╝╚═╝  ╚═╝╚══════╝╚═╝╚══════╝   ╚═╝   \n"
    " ██████╗ ██████╗ ███╗   ██╗ ██████╗ █████╗  ██████╗████████╗\n"
    "██╔════╝██╔═══██╗████╗  ██║██╔════╝██╔══██╗██╔════╝╚══██╔══╝\n"
    "██║     ██║   ██║██╔██╗ ██║██║     ███████║██║        ██║   \n"
    "██║     ██║   ██║██║╚██╗██║██║     ██╔══██║██║        ██║   \n"
    "╚██████╗╚██████╔╝██║ ╚████║╚██████╗██║  ██║╚██████╗   ██║   \n"
    " ╚═════╝ ╚═════╝ ╚═╝  ╚═══╝ ╚═════╝╚═╝  ╚═╝ ╚═════╝   ╚═╝   \n"
)

MENU = (
    "****************************************************\n"
    "[1] 新建联系人，包含 姓名（必填）、电话号码、email、备注\n"
    "[2] 删除联系人\n"
    "[3] 更改联系人部分信息\n"
    "[4] 按姓名或手机号查找联系人信息\n"
    "[5] 打印所有联系人\n"
    "[6] 以 CSV 格式导出通讯录\n"
    "[7] 导入 CSV 格式通讯录\n"
    "[0] 退出程序\n"
    "****************************************************\n"
    "请选择 []\n"
)

MODIFY_MENU = (
    "\n请选择要修改的内容：\n"
    "1. 修改姓名\n"
    "2. 修改某个电话号码\n"
    "3. 修改某个邮箱地址\n"
    "0. 退出修改\n"
    "你的选择: "
)

_INTEGER = re.compile(r"[+-]?\d+")


class _Scanner:
    """Whitespace-delimited reading of words, characters and integers."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""
        self._pos = 0

    def _peek(self) -> str:
        if self._pos >= len(self._buf):
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buf, self._pos = line, 0
        return self._buf[self._pos]

    def _skip_space(self) -> None:
        while self._peek().isspace():
            self._pos += 1

    def word(self, limit: int | None = None) -> str:
        """Read up to ``limit`` non-space characters."""
        self._skip_space()
        start = self._pos
        end = len(self._buf)
        while self._pos < end and not self._buf[self._pos].isspace():
            if limit is not None and self._pos - start >= limit:
                break
            self._pos += 1
        return self._buf[start:self._pos]

    def char(self) -> str:
        """Read a single non-space character."""
        self._skip_space()
        ch = self._buf[self._pos]
        self._pos += 1
        return ch

    def integer(self) -> int | None:
        """Read an integer; a word that is not one is consumed and gives None."""
        self._skip_space()
        match = _INTEGER.match(self._buf, self._pos)
        if match is None:
            self.word()
            return None
        self._pos = match.end()
        return int(match.group())


class Menu:
    """The interactive contact-book menu bound to a pair of text streams."""

    def __init__(
        self,
        book: ContactBook,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.book = book
        self._in = _Scanner(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _read_selection(self) -> int:
        select = self._in.integer()
        while select is None or not 0 <= select <= 7:
            self._say("请输入有效字符！")
            select = self._in.integer()
        return select

    def run(self) -> None:
        """Show the main menu until the user chooses to quit or input ends."""
        actions = {
            1: self.add_contact,
            2: self.delete_contact,
            3: self.modify_contact,
            4: self.search_contact,
            5: self.print_all,
            6: self.export_contacts,
            7: self.import_contacts,
        }
        self._say()
        self._write(TITLE)
        self._say()
        self._say(f"LinkList Contact {VERSION}")
        self._say()
        try:
            while True:
                self._write(MENU)
                select = self._read_selection()
                if select == 0:
                    return
                actions[select]()
        except EOFError:
            return

    def add_contact(self) -> Contact:
        """Ask for a new contact's details and append it to the book."""
        self._say("请输入联系人姓名: ")
        name = self._in.word(NAME_MAX_LEN)
        self._say("请输入联系人备注: ")
        note = self._in.word(NOTE_MAX_LEN)
        contact = Contact(name, note=note)

        while True:
            self._say("请输入电话号码: ")
            contact.add_phone(self._in.word(PHONE_MAX_LEN))
            self._say("继续添加号码？(y/n): ")
            if self._in.char() != "y":
                break

        while True:
            self._say("请输入邮箱: ")
            contact.add_email(self._in.word(EMAIL_MAX_LEN))
            self._say("继续添加邮箱？(y/n): ")
            if self._in.char() != "y":
                break

        return self.book.add(contact)

    def delete_contact(self) -> None:
        """Ask for a name and remove the contact that has it."""
        self._say("请输入被删除联系人的姓名：")
        name = self._in.word()
        try:
            self.book.remove_by_name(name)
        except ContactNotFoundError:
            self._say(f'未找到名为 "{name}" 的联系人。')
            return
        self._say(f'联系人 "{name}" 已成功删除。')

    def modify_contact(self) -> None:
        """Ask for a name and edit that contact's name, phones or e-mails."""
        self._say("请输入被修改联系人的姓名")
        name = self._in.word()
        try:
            contact = self.book.find_by_name(name)
        except ContactNotFoundError:
            self._say(f'未找到名为 "{name}" 的联系人。')
            return

        self._say(f"已找到联系人: {contact.display_name}")
        while True:
            self._write(MODIFY_MENU)
            choice = self._in.integer()
            if choice == 0:
                return
            if choice == 1:
                self._write("请输入新姓名: ")
                contact.display_name = self._in.word(NAME_MAX_LEN)
                self._say(f"姓名已更新为: {contact.display_name}")
            elif choice == 2:
                self._modify_phone(contact)
            elif choice == 3:
                self._modify_email(contact)

    def _pick_index(self, prompt: str, count: int) -> int | None:
        self._write(prompt)
        target = self._in.integer()
        index = max(target if target is not None else 1, 1) - 1
        return index if index < count else None

    def _modify_phone(self, contact: Contact) -> None:
        for number, phone in enumerate(contact.phones, start=1):
            self._say(f"{number}. {phone.number}")
        if not contact.phones:
            self._say("该联系人没有电话号码。")
            return
        index = self._pick_index("请选择要修改的号码编号: ", len(contact.phones))
        if index is None:
            self._say("无效编号。")
            return
        phone = contact.phones[index]
        self._write("请输入新号码: ")
        phone.number = self._in.word(PHONE_MAX_LEN)
        self._say(f"号码已更新为: {phone.number}")

    def _modify_email(self, contact: Contact) -> None:
        for number, email in enumerate(contact.emails, start=1):
            self._say(f"{number}. {email.address}")
        if not contact.emails:
            self._say("该联系人没有邮箱地址。")
            return
        index = self._pick_index("请选择要修改的邮箱编号: ", len(contact.emails))
        if index is None:
            self._say("无效编号。")
            return
        email = contact.emails[index]
        self._write("请输入新邮箱: ")
        email.address = self._in.word(EMAIL_MAX_LEN)
        self._say(f"邮箱已更新为: {email.address}")

    def search_contact(self) -> list[Contact]:
        """Ask for a keyword and print every contact it matches."""
        self._say("请输入搜索关键字（电话号码 或 姓名）")
        keyword = self._in.word()
        found = self.book.search(keyword)
        for number, contact in enumerate(found, start=1):
            self._say(f"\n🔍 匹配到联系人 #{number}")
            self._say(f"姓名: {contact.display_name}")
            self._say(f"备注: {contact.note}")
            self._say("电话号码:")
            for phone in contact.phones:
                self._say(f"  - {phone.number}")
            self._say("邮箱地址:")
            for email in contact.emails:
                self._say(f"  - {email.address}")
        if not found:
            self._say(f'未找到包含 "{keyword}" 的联系人。')
        return found

    def print_all(self) -> None:
        """Print every contact in the book."""
        if not len(self.book):
            self._say("当前没有任何联系人。")
            return
        self._say("=== 联系人列表 ===")
        for contact in self.book:
            self._say(f"显示名: {contact.display_name}")
            self._say(f"备注: {contact.note}")
            for number, phone in enumerate(contact.phones, start=1):
                self._say(f"电话{number}: {phone.number} ")
            for number, email in enumerate(contact.emails, start=1):
                self._say(f"邮箱{number}: {email.address} ")
            self._say("=================")
        self._say("\n=== 全部联系人输出完毕 ===")

    def export_contacts(self) -> None:
        """Write the book to the export file in the working directory."""
        export_csv(self.book, EXPORT_PATH)
        self._say(f"通讯录已导出至{EXPORT_PATH}")

    def import_contacts(self) -> int:
        """Ask for a CSV file name and append its contacts to the book."""
        self._say("请输入要导入的通讯录名称（仅支持CSV文件，且需要输入.csv扩展名）")
        filename = self._in.word(FILENAME_MAX_LEN)
        try:
            imported = import_csv(self.book, filename)
        except EmptyCsvError:
            self._say(f"文件 {filename} 为空。")
            return 0
        except OSError as exc:
            self._say(f"无法打开文件 {filename}：{exc.strerror or exc}")
            return 0
        self._say(f"已导入 {imported} 条联系人")
        return imported


def main(argv: list[str] | None = None) -> int:
    """Run the interactive contact book on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="linkcontact", description="Interactive contact book."
    )
    parser.add_argument("--version", action="version", version=VERSION)
    parser.parse_args(argv)
    book = ContactBook()
    Menu(book).run()
    book.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())