from typing import Optional


class TextValidator:
    """Turns raw prompt text into the trimmed, non-empty strings the core expects."""

    @staticmethod
    def clean(text: Optional[str]) -> str:
        if text is None:
            return ""
        return text.strip()

    @staticmethod
    def is_non_empty(text: Optional[str]) -> bool:
        return bool(TextValidator.clean(text))


class NumberValidator:
    """Parses whole numbers typed at a prompt."""

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        """Return the integer in ``raw`` or None when it is not one."""
        s = TextValidator.clean(raw)
        if s.startswith(("+", "-")):
            sign, digits = s[0], s[1:]
        else:
            sign, digits = "", s
        if not digits.isdigit():
            return None
        # isdigit() also accepts superscripts and other non-ASCII digits
        try:
            return int(sign + digits)
        except ValueError:
            return None

    @staticmethod
    def parse_positive_int(raw: Optional[str]) -> Optional[int]:
        value = NumberValidator.parse_int(raw)
        if value is None or value <= 0:
            return None
        return value
