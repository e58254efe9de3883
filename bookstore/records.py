"""Book and transaction records, kept in memory and stored as comma-separated lines."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import IO, Iterable

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class RecordType(enum.Enum):
    """Which kind of record a file holds."""

    ITEM = "item"
    TRANSACTION = "transaction"


class RecordFormatError(ValueError):
    """A line in a record file does not have the fields it needs."""


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, or 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _fields(line: str, count: int) -> list[str]:
    """Split ``line`` on commas, dropping empty fields, and keep the first ``count``."""
    tokens = [token for token in line.split(",") if token]
    if len(tokens) < count:
        raise RecordFormatError(
            f"expected {count} fields, found {len(tokens)}: {line!r}"
        )
    return tokens[:count]


@dataclass(frozen=True)
class Book:
    """A book for sale."""

    code: str
    name: str
    type: str
    price: int

    def to_line(self) -> str:
        """Render the book as one line of a book file, without the newline."""
        return f"{self.code},{self.name},{self.type},{self.price}"

    @classmethod
    def from_line(cls, line: str) -> Book:
        """Parse one line of a book file."""
        code, name, kind, price = _fields(line, 4)
        return cls(code, name, kind, _leading_int(price))


@dataclass(frozen=True)
class Transaction:
    """A sale of some copies of a book; the book is a copy taken at sale time."""

    code: str
    quantity: int
    book: Book

    def to_line(self) -> str:
        """Render the transaction as one line of a transaction file."""
        return f"{self.code},{self.quantity},{self.book.to_line()}"

    @classmethod
    def from_line(cls, line: str) -> Transaction:
        """Parse one line of a transaction file."""
        code, quantity, book_code, name, kind, price = _fields(line, 6)
        book = Book(book_code, name, kind, _leading_int(price))
        return cls(code, _leading_int(quantity), book)


@dataclass
class RecordStore:
    """Books and transactions held in memory; disk is touched only on load and save."""

    books: list[Book] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)

    def load(self, path, record_type: RecordType) -> None:
        """Append the records in ``path``; a file that cannot be opened leaves the store as it is."""
        try:
            stream = open(path, encoding="utf-8")
        except OSError:
            return
        with stream:
            if record_type is RecordType.ITEM:
                self.load_books(stream)
            else:
                self.load_transactions(stream)

    def save(self, path, record_type: RecordType) -> None:
        """Write the records of one kind to ``path``, replacing what was there."""
        with open(path, "w", encoding="utf-8") as stream:
            if record_type is RecordType.ITEM:
                self.dump_books(stream)
            else:
                self.dump_transactions(stream)

    def load_books(self, lines: Iterable[str]) -> None:
        """Append a book for each line; stops with an error at the first bad line."""
        for line in lines:
            self.books.append(Book.from_line(line))

    def load_transactions(self, lines: Iterable[str]) -> None:
        """Append a transaction for each line; stops with an error at the first bad line."""
        for line in lines:
            self.transactions.append(Transaction.from_line(line))

    def dump_books(self, stream: IO[str]) -> None:
        """Write every book as a line to ``stream``."""
        for book in self.books:
            stream.write(book.to_line() + "\n")

    def dump_transactions(self, stream: IO[str]) -> None:
        """Write every transaction as a line to ``stream``."""
        for transaction in self.transactions:
            stream.write(transaction.to_line() + "\n")

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    def add_transaction(self, transaction: Transaction) -> None:
        self.transactions.append(transaction)

    @staticmethod
    def _check_index(records: list, index: int) -> None:
        if not 0 <= index < len(records):
            raise IndexError(f"no record at index {index}")

    def delete_book(self, index: int) -> Book:
        """Remove and return the book at ``index``."""
        self._check_index(self.books, index)
        return self.books.pop(index)

    def delete_transaction(self, index: int) -> Transaction:
        """Remove and return the transaction at ``index``."""
        self._check_index(self.transactions, index)
        return self.transactions.pop(index)

    def format_books(self) -> str:
        """The book listing as shown to the user."""
        rows = "".join(
            f"Book Index: {i}, Code: {b.code}, Name: {b.name}, "
            f"Type: {b.type}, Price: {b.price}\n"
            for i, b in enumerate(self.books)
        )
        return f"\n=== Daftar Buku ===\n{rows}-------------------\n\n"

    def format_transactions(self) -> str:
        """The transaction listing as shown to the user."""
        rows = "".join(
            f"Transaction Index: {i}, Code: {t.code}, Quantity: {t.quantity}, "
            f"Book Code: {t.book.code}, Book Name: {t.book.name}, "
            f"Book Type: {t.book.type}, Book Price: {t.book.price}\n"
            for i, t in enumerate(self.transactions)
        )
        return f"\n=== Daftar Transaksi ===\n{rows}------------------------\n\n"