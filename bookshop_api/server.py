"""HTTP API serving shops and books."""

from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable

from flask import Flask, Response, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from . import models, views
from .config import get_configs
from .database import Database

API_PREFIX = "/api/v1"
DEFAULT_PORT = 8080

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Resource:
    plural: str
    get_all: Callable[[Database], list]
    get_one: Callable[[Database, Any], Any]
    create: Callable[[Database, Any], Any]
    update: Callable[[Database, Any, Any], Any]
    delete: Callable[[Database, Any], None]
    render_all: Callable[[list], dict]
    render_one: Callable[[Any], dict]


_RESOURCES = (
    _Resource(
        "shops",
        models.get_all_shops,
        models.get_shop,
        models.create_shop,
        models.update_shop,
        models.delete_shop,
        views.render_shops,
        views.render_shop,
    ),
    _Resource(
        "books",
        models.get_all_books,
        models.get_book,
        models.create_book,
        models.update_book,
        models.delete_book,
        views.render_books,
        views.render_book,
    ),
)


def _abort(status: int, error: Exception) -> Response:
    log.error("%s", error)
    return Response(status=status)


def _request_payload() -> Any:
    try:
        return json.loads(request.get_data())
    except ValueError as error:
        raise models.InvalidPayloadError(f"invalid JSON body: {error}") from error


def _register(app: Flask, database: Database, resource: _Resource) -> None:
    base = f"{API_PREFIX}/{resource.plural}"
    item = f"{base}/<record_id>"

    def index():
        try:
            records = resource.get_all(database)
        except SQLAlchemyError as error:
            return _abort(404, error)
        return jsonify(resource.render_all(records))

    def create():
        try:
            resource.create(database, _request_payload())
        except (models.InvalidPayloadError, SQLAlchemyError) as error:
            return _abort(400, error)
        return Response(status=204)

    def show(record_id):
        try:
            record = resource.get_one(database, record_id)
        except (models.NotFoundError, SQLAlchemyError) as error:
            return _abort(404, error)
        return jsonify(resource.render_one(record))

    def update(record_id):
        try:
            record = resource.update(database, record_id, _request_payload())
        except (models.NotFoundError, models.InvalidPayloadError, SQLAlchemyError) as error:
            return _abort(400, error)
        return jsonify(resource.render_one(record))

    def destroy(record_id):
        try:
            resource.delete(database, record_id)
        except SQLAlchemyError as error:
            return _abort(403, error)
        return Response(status=204)

    name = resource.plural
    app.add_url_rule(base, f"index_{name}", index, methods=["GET"])
    app.add_url_rule(base, f"create_{name}", create, methods=["POST"])
    app.add_url_rule(item, f"show_{name}", show, methods=["GET"])
    app.add_url_rule(item, f"update_{name}", update, methods=["PUT"])
    app.add_url_rule(item, f"delete_{name}", destroy, methods=["DELETE"])


def create_app(database: Database) -> Flask:
    """Build the application with all routes bound to ``database``."""
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.json.sort_keys = False
    for resource in _RESOURCES:
        _register(app, database, resource)
    return app


def main(argv=None) -> int:
    """Load configuration, connect to the database and serve the API."""
    parser = argparse.ArgumentParser(description="Serve the shop and book API.")
    parser.add_argument("--env", default=None, help="configuration name (default: $ENV_GO)")
    parser.add_argument("--config-dir", default=None, help="directory of YAML configs")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument(
        "--port", type=int, default=int(os.environ.get("PORT", DEFAULT_PORT))
    )
    args = parser.parse_args(argv)

    configs = get_configs(args.env, args.config_dir)
    with Database.from_configs(configs) as database:
        create_app(database).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())