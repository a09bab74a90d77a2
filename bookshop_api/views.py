"""JSON representations of shops and books."""

from __future__ import annotations

from typing import Any, Iterable

from .entities import Book, Shop


def shop_to_dict(shop: Shop) -> dict[str, Any]:
    """Public fields of a shop."""
    return {
        "id": shop.id or 0,
        "shop_name": shop.shop_name or "",
        "shop_description": shop.shop_description or "",
    }


def book_to_dict(book: Book) -> dict[str, Any]:
    """Public fields of a book, with its sales rank."""
    return {
        "id": book.id or 0,
        "book_name": book.book_name or "",
        "book_description": book.book_description or "",
        "sales": book.sales or 0,
        "rank": book.rank(),
    }


def render_shops(shops: Iterable[Shop]) -> dict[str, Any]:
    """Response body for a list of shops."""
    return {"shops": [shop_to_dict(shop) for shop in shops]}


def render_shop(shop: Shop) -> dict[str, Any]:
    """Response body for one shop."""
    return shop_to_dict(shop)


def render_books(books: Iterable[Book]) -> dict[str, Any]:
    """Response body for a list of books."""
    return {"books": [book_to_dict(book) for book in books]}


def render_book(book: Book) -> dict[str, Any]:
    """Response body for one book."""
    return book_to_dict(book)