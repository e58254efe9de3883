"""Interactive menu for recording books and sales."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import IO

from .records import Book, RecordFormatError, RecordStore, RecordType, Transaction

BOOK_FILE = "databuku.txt"
TRANSACTION_FILE = "datatransaksi.txt"

MENU = (
    "=== Menu ===\n"
    "1. Input Buku\n"
    "2. Input Transaksi\n"
    "3. View Buku\n"
    "4. View Transaksi\n"
    "5. Delete Buku\n"
    "6. Delete Transaksi\n"
    "7. Exit\n\n"
    "Pilih menu : "
)


def _clear_screen() -> None:
    if os.name == "nt" and sys.stdout.isatty():
        subprocess.run("cls", shell=True, check=False)


class Session:
    """One run of the menu over a record store."""

    def __init__(
        self,
        store: RecordStore,
        book_path=BOOK_FILE,
        transaction_path=TRANSACTION_FILE,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self.store = store
        self.book_path = book_path
        self.transaction_path = transaction_path
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_text(self) -> str:
        """Read the next non-blank line, without its leading whitespace."""
        while True:
            text = self._read_line().lstrip()
            if text:
                return text

    def _read_int(self) -> int | None:
        """Read the next non-blank line as an integer, or None if it is not one."""
        while True:
            text = self._read_line().strip()
            if text:
                break
        try:
            return int(text)
        except ValueError:
            return None

    def input_book(self) -> None:
        self._write("\n=== Input Data Buku ===\n")
        self._write("Masukkan kode buku : ")
        code = self._read_text()
        self._write("Masukkan nama buku : ")
        name = self._read_text()
        self._write("Masukkan jenis buku : ")
        kind = self._read_text()
        self._write("Masukkan harga buku : ")
        price = self._read_int()
        if price is None:
            self._write("\nInput tidak valid!\n\n")
            return
        self.store.add_book(Book(code, name, kind, price))
        self._write("\nData buku berhasil ditambahkan!\n\n")

    def input_transaction(self) -> None:
        self._write("\n=== Input Transaksi ===\n")
        self.view_books()
        self._write("Masukkan kode transaksi : ")
        code = self._read_text()
        self._write("Pilih index buku yang ingin dijual (mulai dari 0) : ")
        index = self._read_int()
        self._write("Masukkan jumlah buku yang dijual : ")
        quantity = self._read_int()
        if index is None or not 0 <= index < len(self.store.books):
            self._write("\nIndex tidak valid!\n\n")
            return
        if quantity is None:
            self._write("\nInput tidak valid!\n\n")
            return
        self.store.add_transaction(Transaction(code, quantity, self.store.books[index]))
        self._write("\nTransaksi berhasil ditambahkan!\n\n")

    def delete_book(self) -> None:
        self.view_books()
        self._write("Masukkan index buku yang ingin dihapus: ")
        index = self._read_int()
        try:
            if index is None:
                raise IndexError(index)
            self.store.delete_book(index)
        except IndexError:
            self._write("Index tidak valid atau buku tidak ditemukan.\n")
        else:
            self._write("Buku berhasil dihapus.\n")

    def delete_transaction(self) -> None:
        self.view_transactions()
        self._write("Masukkan index transaksi yang ingin dihapus: ")
        index = self._read_int()
        try:
            if index is None:
                raise IndexError(index)
            self.store.delete_transaction(index)
        except IndexError:
            self._write("Index tidak valid atau transaksi tidak ditemukan.\n")
        else:
            self._write("Transaksi berhasil dihapus.\n")

    def view_books(self) -> None:
        self._write(self.store.format_books())

    def view_transactions(self) -> None:
        self._write(self.store.format_transactions())

    def _shutdown(self) -> None:
        self._write("\nMenyimpan data...\n")
        try:
            self.store.save(self.book_path, RecordType.ITEM)
        except OSError:
            self._write("Failed to save book file.\n")
        try:
            self.store.save(self.transaction_path, RecordType.TRANSACTION)
        except OSError:
            self._write("Failed to save transaction file.\n")
        self._write("\nProgram selesai.\n\n")

    def run(self) -> None:
        """Show the menu until the user exits (or input ends), then save."""
        actions = {
            1: self.input_book,
            2: self.input_transaction,
            3: self.view_books,
            4: self.view_transactions,
            5: self.delete_book,
            6: self.delete_transaction,
        }
        try:
            while True:
                self._write(MENU)
                choice = self._read_int()
                if choice == 7:
                    break
                action = actions.get(choice)
                if action is None:
                    self._write("Pilihan tidak valid. Coba lagi.\n\n")
                else:
                    action()
        except EOFError:
            pass
        self._shutdown()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="bookstore", description="Record books and sales.")
    parser.add_argument("--books", default=BOOK_FILE, help="book data file")
    parser.add_argument("--transactions", default=TRANSACTION_FILE, help="transaction data file")
    args = parser.parse_args(argv)

    store = RecordStore()
    try:
        store.load(args.books, RecordType.ITEM)
    except RecordFormatError:
        print("Failed to load book file.")
        return 1
    try:
        store.load(args.transactions, RecordType.TRANSACTION)
    except RecordFormatError:
        print("Failed to load transaction file.")
        return 1

    _clear_screen()
    Session(store, args.books, args.transactions).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())