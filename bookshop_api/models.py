"""Create, read, update and delete operations for shops and books."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import delete, inspect, select

from .database import Database
from .entities import Book, Shop


class NotFoundError(LookupError):
    """Raised when no record has the requested id."""


class InvalidPayloadError(ValueError):
    """Raised when a request payload cannot be bound to an entity."""


def _unsigned(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**64:
        raise InvalidPayloadError(f"field {key!r} must be an unsigned 64-bit integer")
    return value


def _text(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise InvalidPayloadError(f"field {key!r} must be a string")
    return value


def _timestamp(value: Any, key: str) -> datetime:
    try:
        return datetime.fromisoformat(value[:-1] + "+00:00" if value[-1:] in ("Z", "z") else value)
    except (TypeError, ValueError) as error:
        raise InvalidPayloadError(f"field {key!r} is not a valid timestamp") from error


_COMMON = {
    "id": ("id", _unsigned),
    "createdat": ("created_at", _timestamp),
    "deletedat": ("deleted_at", _timestamp),
}
_SHOP_FIELDS = {
    **_COMMON,
    "shopname": ("shop_name", _text),
    "shopdescription": ("shop_description", _text),
}
_BOOK_FIELDS = {
    **_COMMON,
    "bookname": ("book_name", _text),
    "bookdescription": ("book_description", _text),
    "sales": ("sales", _unsigned),
}


def _bind(payload: Any, fields: dict) -> dict[str, Any]:
    """Map a JSON object onto attribute values.

    Keys match case-insensitively, with or without underscores; unknown keys
    are ignored and nulls leave fields untouched except ``deleted_at``.
    """
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload must be a JSON object")
    values: dict[str, Any] = {}
    for key, value in payload.items():
        spec = fields.get(str(key).replace("_", "").lower())
        if spec is None:
            continue
        attribute, convert = spec
        if value is not None:
            values[attribute] = convert(value, key)
        elif attribute == "deleted_at":
            values[attribute] = None
    return values


def _parse_id(raw: Any) -> Optional[int]:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw)
    return int(text) if text.isascii() and text.isdigit() else None


def _not_found(entity: type, raw_id: Any) -> NotFoundError:
    return NotFoundError(f"{entity.__name__.lower()} {raw_id!r} not found")


def _get_all(database: Database, entity: type) -> list:
    with database.session() as session:
        return list(session.scalars(select(entity).order_by(entity.id)))


def _get(database: Database, entity: type, raw_id: Any):
    record_id = _parse_id(raw_id)
    found = None
    if record_id is not None:
        with database.session() as session:
            found = session.get(entity, record_id)
    if found is None:
        raise _not_found(entity, raw_id)
    return found


def _save(session, entity: type, values: dict):
    """Insert when ``id`` is missing or zero, otherwise insert-or-update."""
    if not values.get("id"):
        values.pop("id", None)
        record = entity(**values)
        session.add(record)
    else:
        record = session.merge(entity(**values))
    session.flush()
    return record


def _create(database: Database, entity: type, payload: Any, fields: dict):
    values = _bind(payload, fields)
    with database.session() as session:
        if values.get("id"):
            record = entity(**values)
            session.add(record)
            session.flush()
            return record
        return _save(session, entity, values)


def _update(database: Database, entity: type, raw_id: Any, payload: Any, fields: dict):
    record_id = _parse_id(raw_id)
    with database.session() as session:
        current = session.get(entity, record_id) if record_id is not None else None
        if current is None:
            raise _not_found(entity, raw_id)
        state = {attr.key: getattr(current, attr.key) for attr in inspect(entity).column_attrs}
        state.update(_bind(payload, fields))
        return _save(session, entity, state)


def _delete(database: Database, entity: type, raw_id: Any) -> None:
    record_id = _parse_id(raw_id)
    if record_id is not None:
        with database.session() as session:
            session.execute(delete(entity).where(entity.id == record_id))


def get_all_books(database: Database) -> list[Book]:
    """Return every book, ordered by id."""
    return _get_all(database, Book)


def get_book(database: Database, book_id: Any) -> Book:
    """Return the book with ``book_id`` or raise NotFoundError."""
    return _get(database, Book, book_id)


def create_book(database: Database, payload: Any) -> Book:
    """Insert a book built from ``payload``."""
    return _create(database, Book, payload, _BOOK_FIELDS)


def update_book(database: Database, book_id: Any, payload: Any) -> Book:
    """Apply ``payload`` to the book with ``book_id`` and save it."""
    return _update(database, Book, book_id, payload, _BOOK_FIELDS)


def delete_book(database: Database, book_id: Any) -> None:
    """Delete the book with ``book_id``; a missing book is not an error."""
    _delete(database, Book, book_id)


def get_all_shops(database: Database) -> list[Shop]:
    """Return every shop, ordered by id."""
    return _get_all(database, Shop)


def get_shop(database: Database, shop_id: Any) -> Shop:
    """Return the shop with ``shop_id`` or raise NotFoundError."""
    return _get(database, Shop, shop_id)


def create_shop(database: Database, payload: Any) -> Shop:
    """Insert a shop built from ``payload``."""
    return _create(database, Shop, payload, _SHOP_FIELDS)


def update_shop(database: Database, shop_id: Any, payload: Any) -> Shop:
    """Apply ``payload`` to the shop with ``shop_id`` and save it."""
    return _update(database, Shop, shop_id, payload, _SHOP_FIELDS)


def delete_shop(database: Database, shop_id: Any) -> None:
    """Delete the shop with ``shop_id``; a missing shop is not an error."""
    _delete(database, Shop, shop_id)