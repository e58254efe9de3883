import io
import sys

from bookstore.cli import Session, main
from bookstore.records import Book, RecordStore, RecordType, Transaction

BOOK = Book("B01", "Laskar Pelangi", "Novel", 85000)


def run_session(script, tmp_path, store=None):
    store = store if store is not None else RecordStore()
    out = io.StringIO()
    session = Session(
        store,
        tmp_path / "books.txt",
        tmp_path / "transactions.txt",
        stdin=io.StringIO(script),
        stdout=out,
    )
    session.run()
    return store, out.getvalue()


def test_input_book_is_saved_on_exit(tmp_path):
    store, output = run_session("1\nB1\nName Here\nType\n100\n7\n", tmp_path)
    assert store.books == [Book("B1", "Name Here", "Type", 100)]
    assert "Data buku berhasil ditambahkan!" in output
    saved = RecordStore()
    saved.load(tmp_path / "books.txt", RecordType.ITEM)
    assert saved.books == store.books


def test_invalid_menu_choice(tmp_path):
    _, output = run_session("9\nabc\n7\n", tmp_path)
    assert output.count("Pilihan tidak valid. Coba lagi.") == 2


def test_input_transaction_copies_selected_book(tmp_path):
    store, output = run_session("2\nT01\n0\n5\n7\n", tmp_path, RecordStore(books=[BOOK]))
    assert store.transactions == [Transaction("T01", 5, BOOK)]
    assert "Transaksi berhasil ditambahkan!" in output


def test_input_transaction_rejects_bad_index(tmp_path):
    store, output = run_session("2\nT01\n3\n5\n7\n", tmp_path, RecordStore(books=[BOOK]))
    assert store.transactions == []
    assert "Index tidak valid!" in output


def test_delete_book(tmp_path):
    store, output = run_session("5\n0\n7\n", tmp_path, RecordStore(books=[BOOK]))
    assert store.books == []
    assert "Buku berhasil dihapus." in output


def test_delete_book_invalid_index(tmp_path):
    store, output = run_session("5\n-1\n7\n", tmp_path, RecordStore(books=[BOOK]))
    assert store.books == [BOOK]
    assert "Index tidak valid atau buku tidak ditemukan." in output


def test_delete_transaction(tmp_path):
    store = RecordStore(transactions=[Transaction("T01", 1, BOOK)])
    store, output = run_session("6\n0\n6\n0\n7\n", tmp_path, store)
    assert store.transactions == []
    assert "Transaksi berhasil dihapus." in output
    assert "Index tidak valid atau transaksi tidak ditemukan." in output


def test_view_books_shows_listing(tmp_path):
    store = RecordStore(books=[BOOK])
    _, output = run_session("3\n7\n", tmp_path, store)
    assert store.format_books() in output


def test_end_of_input_saves_and_exits(tmp_path):
    _, output = run_session("1\nB1\nN\nT\n5\n", tmp_path)
    assert output.endswith("\nProgram selesai.\n\n")
    saved = RecordStore()
    saved.load(tmp_path / "books.txt", RecordType.ITEM)
    assert saved.books == [Book("B1", "N", "T", 5)]


def test_save_failure_is_reported(tmp_path):
    out = io.StringIO()
    Session(
        RecordStore(),
        tmp_path,
        tmp_path / "transactions.txt",
        stdin=io.StringIO("7\n"),
        stdout=out,
    ).run()
    assert "Failed to save book file." in out.getvalue()
    assert "Failed to save transaction file." not in out.getvalue()


def test_main_reports_bad_book_file(tmp_path, capsys):
    books = tmp_path / "books.txt"
    books.write_text("broken\n", encoding="utf-8")
    code = main(["--books", str(books), "--transactions", str(tmp_path / "t.txt")])
    assert code == 1
    assert "Failed to load book file." in capsys.readouterr().out


def test_main_runs_menu(tmp_path, monkeypatch, capsys):
    books = tmp_path / "books.txt"
    books.write_text(BOOK.to_line() + "\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n7\n"))
    code = main(["--books", str(books), "--transactions", str(tmp_path / "t.txt")])
    assert code == 0
    output = capsys.readouterr().out
    assert RecordStore(books=[BOOK]).format_books() in output
    assert (tmp_path / "t.txt").read_text(encoding="utf-8") == ""