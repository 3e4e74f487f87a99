import re


class ISBNValidator:
    """ISBN-10 / ISBN-13 checksum validation for catalog identifiers."""

    @staticmethod
    def normalize_isbn(raw: str) -> str:
        if raw is None:
            return ""
        s = re.sub(r"[^0-9Xx]", "", raw)
        return s.upper()

    @staticmethod
    def is_valid_isbn(isbn: str) -> bool:
        if not isbn:
            return False
        s = ISBNValidator.normalize_isbn(isbn)
        if len(s) == 10:
            # weighted 10..1 sum must be divisible by 11
            total = 0
            for i, ch in enumerate(s[:-1]):
                if not ch.isdigit():
                    return False
                total += (10 - i) * int(ch)
            check = s[-1]
            if check == "X":
                check_val = 10
            elif check.isdigit():
                check_val = int(check)
            else:
                return False
            return (total + check_val) % 11 == 0
        elif len(s) == 13 and s.isdigit():
            total = 0
            for i, ch in enumerate(s[:-1]):
                factor = 1 if i % 2 == 0 else 3
                total += factor * int(ch)
            check_val = (10 - (total % 10)) % 10
            return check_val == int(s[-1])
        return False
