from __future__ import annotations


class BookRecord:
    """A titled book in the catalog and how many of its copies are on the shelf."""

    def __init__(self, book_id: int, title: str, author: str, total_copies: int) -> None:
        self.id = book_id
        self.title = title.strip()
        self.author = author.strip()
        self.total_copies = total_copies
        self.available_copies = total_copies

    def __str__(self) -> str:
        return f'ID:{self.id} | "{self.title}" by {self.author} | copies: {self.available_copies}'

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return (
            f"BookRecord(id={self.id!r}, title={self.title!r}, author={self.author!r}, "
            f"available={self.available_copies}/{self.total_copies})"
        )

    @property
    def on_loan(self) -> int:
        return self.total_copies - self.available_copies

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "total_copies": self.total_copies,
            "available_copies": self.available_copies,
        }
