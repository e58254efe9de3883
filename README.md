# bookstore

A small interactive bookstore register for the terminal. It keeps a catalogue of books and a log of sales transactions. Both are stored as plain comma-separated text files:

- `databuku.txt` holds the books. Each line is `code,name,type,price`.
- `datatransaksi.txt` holds the transactions. Each line is `transaction_code,quantity,book_code,book_name,book_type,book_price`.

The program reads both files at startup. A file that cannot be opened counts as an empty list. Both files are written back when you choose *Exit*, or when input ends.

## Installation

```
pip install .
```

## Usage

```
bookstore
bookstore --books path/to/books.txt --transactions path/to/sales.txt
```

By default the files `databuku.txt` and `datatransaksi.txt` are used in the current directory. `--books` and `--transactions` select other files.

The menu offers these choices:

1. Input Buku: add a book by code, name, type and price.
2. Input Transaksi: record a sale. You give a transaction code, choose a book by its index and enter a quantity. The transaction keeps its own copy of the book's details, so later changes to the catalogue do not affect it.
3. View Buku: list the books with their indexes.
4. View Transaksi: list the transactions with their indexes.
5. Delete Buku: remove a book by index.
6. Delete Transaksi: remove a transaction by index.
7. Exit: save both files and quit.

An invalid menu choice, an out-of-range index or a number that does not parse is reported and the menu is shown again.

If a data file has a line with too few fields, the program prints that the file failed to load and exits with status 1 without writing anything. Numeric fields are read from their leading digits, and a field without any digits counts as 0.

## Library use

The storage layer is in `bookstore.records`:

```python
from bookstore.records import Book, RecordStore, RecordType, Transaction

store = RecordStore()
store.load("databuku.txt", RecordType.ITEM)
store.add_book(Book(code="B01", name="Dune", type="Novel", price=90000))
store.add_transaction(Transaction(code="T01", quantity=2, book=store.books[0]))
store.save("databuku.txt", RecordType.ITEM)
store.save("datatransaksi.txt", RecordType.TRANSACTION)
print(store.format_books())
```

- `Book` and `Transaction` are frozen dataclasses. Each has `to_line()` and `from_line(line)` for the file format.
- `RecordStore.load` appends the records found in a file. It raises `RecordFormatError`, a subclass of `ValueError`, at the first line that is missing fields. `load_books` and `load_transactions` do the same for any iterable of lines.
- `RecordStore.save` overwrites a file. `dump_books` and `dump_transactions` write to any text stream.
- `delete_book` and `delete_transaction` remove and return the record at an index. They raise `IndexError` when the index is out of range.
- `format_books` and `format_transactions` return the listings shown in the menu.

The interactive menu is `bookstore.cli.Session`. It runs over a `RecordStore` and can be given its own input and output streams.

## What it does not do

The files hold no header and do not quote or escape values. A name or type that contains a comma will not read back correctly. There is no stock tracking and no totals: a transaction records a quantity and a copy of the book's details, and nothing more.

## Development

```
pip install -e ".[test]"
pytest
```