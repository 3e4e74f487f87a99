import pytest

from libcatalog.validators import ISBNValidator


@pytest.mark.parametrize("isbn", ["0306406152", "080442957X", "9780306406157", "978-0-306-40615-7"])
def test_valid_isbns(isbn):
    assert ISBNValidator.is_valid_isbn(isbn)


@pytest.mark.parametrize("isbn", ["", "987654321", "0306406153", "9780306406158", "ABCDEFGHIJ"])
def test_invalid_isbns(isbn):
    assert not ISBNValidator.is_valid_isbn(isbn)


def test_normalize_isbn():
    assert ISBNValidator.normalize_isbn(" 0-8044-2957-x ") == "080442957X"
    assert ISBNValidator.normalize_isbn(None) == ""
