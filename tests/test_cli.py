import json

from typer.testing import CliRunner

from main import app, build_library, seed_demo_catalog

runner = CliRunner()


def test_demo_plain_output():
    result = runner.invoke(app, ["demo", "--channel", "email"])
    assert result.exit_code == 0
    assert "user01 was notified about 3 new book(s)." in result.stdout
    assert "Error: Book with identifier 987654321 already exists." in result.stdout
    assert "Loaned 987654321 to user01." in result.stdout
    assert "987654321 -> user01" in result.stdout
    assert "user01 returned 987654321." in result.stdout
    assert "123456789 - The Great Gatsby by F. Scott Fitzgerald" in result.stdout
    assert "Total Books: 3" in result.stdout
    assert "Unique Authors: 2" in result.stdout
    assert "Active Loans: 0" in result.stdout


def test_demo_console_channel_prints_notifications():
    result = runner.invoke(app, ["demo", "--channel", "console", "--borrower", "user42"])
    assert result.exit_code == 0
    assert "You have borrowed the book 1984" in result.stdout
    assert "Thank you!" in result.stdout
    assert "user42 returned 987654321." in result.stdout


def test_demo_unknown_channel():
    result = runner.invoke(app, ["demo", "--channel", "pigeon"])
    assert result.exit_code == 1
    assert "Error: Unknown notification channel: pigeon" in result.stdout


def test_search_by_author():
    result = runner.invoke(app, ["search", "--author", "Orwell"])
    assert result.exit_code == 0
    assert "987654321 - 1984 by George Orwell" in result.stdout
    assert "9780451526342 - Animal Farm by George Orwell" in result.stdout
    assert "Gatsby" not in result.stdout


def test_search_combines_criteria():
    result = runner.invoke(app, ["search", "--author", "Orwell", "--title", "Farm"])
    assert result.exit_code == 0
    assert "Animal Farm" in result.stdout
    assert "1984" not in result.stdout


def test_search_json_output():
    result = runner.invoke(app, ["--output", "json", "search", "--identifier", "987654321"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"title": "1984", "author": "George Orwell", "identifier": "987654321"}
    ]


def test_search_no_match():
    result = runner.invoke(app, ["search", "--title", "Hamlet"])
    assert result.exit_code == 0
    assert "No books match the criteria." in result.stdout


def test_search_requires_a_criterion():
    result = runner.invoke(app, ["search"])
    assert result.exit_code == 2
    assert "Provide --title, --author or --identifier." in result.stdout


def test_seed_demo_catalog_uses_fresh_manager():
    library = build_library("email")
    books = seed_demo_catalog(library)
    assert [b.identifier for b in books] == ["123456789", "987654321", "9780451526342"]
    assert build_library("email").list_books() == []


def _json_lines(stdout):
    return [json.loads(line) for line in stdout.splitlines() if line.startswith(("[", "{"))]


def test_demo_json_output():
    result = runner.invoke(app, ["--output", "json", "demo", "--channel", "email"])
    assert result.exit_code == 0

    loans, books, stats = _json_lines(result.stdout)
    assert [(loan["identifier"], loan["borrower_id"]) for loan in loans] == [("987654321", "user01")]
    assert "loaned_at" in loans[0]
    assert [b["identifier"] for b in books] == ["123456789", "987654321", "9780451526342"]
    assert stats == {"total_books": 3, "unique_authors": 2, "active_loans": 0}


def test_demo_rich_output():
    result = runner.invoke(app, ["--output", "rich", "demo", "--channel", "email"])
    assert result.exit_code == 0
    assert "Loans" in result.stdout
    assert "Books" in result.stdout
    assert "Stats" in result.stdout
    assert "Total Books:" in result.stdout
    assert "Active Loans:" in result.stdout


def test_search_rich_output():
    result = runner.invoke(app, ["--output", "rich", "search", "--author", "Orwell"])
    assert result.exit_code == 0
    assert "Books" in result.stdout
    assert "Animal Farm" in result.stdout
    assert "987654321" in result.stdout
    assert "Gatsby" not in result.stdout
