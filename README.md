# bookshop-api

A small JSON REST API that manages **shops** and **books** stored in a SQL
database, built on Flask and SQLAlchemy. Books carry a sales count, and each
book is given a rank label derived from its sales when it is rendered.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

- `bookshop_api.config` – `get_configs(env=None, directory=None)` reads
  `<directory>/<env>.yml` and returns a `Configs` holding a `DatabaseConfig`
  (`dialect`, `data_source`).
- `bookshop_api.entities` – the SQLAlchemy entities `Shop` and `Book` on the
  declarative `Base`; `Book.rank()` gives the sales rank.
- `bookshop_api.database` – `Database(url)`, an engine plus session factory,
  with `from_configs(configs)`, `migrate()`, `session()` and `close()`.
- `bookshop_api.models` – create, read, update and delete functions for both
  entities, raising `NotFoundError` and `InvalidPayloadError`.
- `bookshop_api.views` – turn entities into the JSON bodies the API returns.
- `bookshop_api.server` – `create_app(database)` builds the Flask application.

## Configuration

`get_configs` reads a YAML file named after the environment. By default the
environment name comes from the `ENV_GO` environment variable and the file is
looked for in `./config`, so the default file is `config/<env>.yml`. A file
looks like this:

```yaml
database:
  dialect: sqlite
  datasource: sqlite:///bookshop.db
```

The `datasource` value is passed to SQLAlchemy as the database URL, so any
database SQLAlchemy supports can be used. `dialect` is read but not otherwise
used. `Database.from_configs` connects with that URL and creates the shop and
book tables if they do not exist yet.

For an in-memory SQLite URL (`sqlite://` or `sqlite:///:memory:`) a single
shared connection is used, so all sessions see the same data.

## Endpoints

All routes live under `/api/v1`.

| Method | Path          | Success                    | Failure |
|--------|---------------|----------------------------|---------|
| GET    | `/shops`      | 200, `{"shops": [...]}`    | 404     |
| GET    | `/shops/<id>` | 200, one shop              | 404     |
| POST   | `/shops`      | 204, empty body            | 400     |
| PUT    | `/shops/<id>` | 200, the updated shop      | 400     |
| DELETE | `/shops/<id>` | 204, empty body            | 403     |
| GET    | `/books`      | 200, `{"books": [...]}`    | 404     |
| GET    | `/books/<id>` | 200, one book              | 404     |
| POST   | `/books`      | 204, empty body            | 400     |
| PUT    | `/books/<id>` | 200, the updated book      | 400     |
| DELETE | `/books/<id>` | 204, empty body            | 403     |

Lists are ordered by id. Failures return an empty body with the status shown.
Updating a record that does not exist answers 400; deleting one that does not
exist answers 204.

A shop is rendered as:

```json
{"id": 1, "shop_name": "test shop name", "shop_description": "test shop description"}
```

A book is rendered as:

```json
{"id": 1, "book_name": "...", "book_description": "...", "sales": 1500, "rank": "売れ筋"}
```

The `rank` field depends on `sales`:

| Sales            | Rank           |
|------------------|----------------|
| more than 10000  | `ベストセラー` |
| more than 1000   | `売れ筋`       |
| more than 100    | `そこそこ`     |
| more than 10     | `ちょいちょい` |
| 10 or fewer      | `null`         |

### Request bodies

POST and PUT take a JSON object. Keys are matched without regard to case or
underscores, so `shop_name`, `ShopName` and `shopname` all set the shop's
name. Shops accept `id`, `shop_name`, `shop_description`, `created_at` and
`deleted_at`; books accept `id`, `book_name`, `book_description`, `sales`,
`created_at` and `deleted_at`. Unknown keys are ignored, and `null` leaves a
field unchanged except for `deleted_at`, which it clears. Ids and sales must be
unsigned integers, names and descriptions strings, and timestamps ISO 8601
strings; anything else, or a body that is not a JSON object, answers 400.

## Using it as a library

```python
from bookshop_api.database import Database
from bookshop_api.server import create_app
from bookshop_api import models

database = Database("sqlite:///:memory:")
database.migrate()

models.create_shop(database, {"shop_name": "Corner Books", "shop_description": "Second-hand"})
print([shop.shop_name for shop in models.get_all_shops(database)])

app = create_app(database)
with app.test_client() as client:
    print(client.get("/api/v1/shops").get_json())

database.close()
```

Looking up a missing record raises `models.NotFoundError`; a request body that
cannot be applied to a record raises `models.InvalidPayloadError`.

## Serving the API

The package installs no command. To serve the API, build the application
yourself and hand it to Flask's development server or any WSGI server:

```python
from bookshop_api.config import get_configs
from bookshop_api.database import Database
from bookshop_api.server import create_app

database = Database.from_configs(get_configs())
try:
    create_app(database).run(host="0.0.0.0", port=8080)
finally:
    database.close()
```