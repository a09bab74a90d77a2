import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session

from bookshop_api.entities import Base, Book, Shop


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.mark.parametrize(
    "sales, expected",
    [
        (10001, "ベストセラー"),
        (10000, "売れ筋"),
        (1001, "売れ筋"),
        (1000, "そこそこ"),
        (101, "そこそこ"),
        (100, "ちょいちょい"),
        (11, "ちょいちょい"),
        (10, None),
        (0, None),
    ],
)
def test_rank_thresholds(sales, expected):
    assert Book(sales=sales).rank() == expected


def test_rank_without_sales_is_none():
    assert Book(book_name="untitled").rank() is None


def test_rank_is_monotonic_in_sales():
    order = [None, "ちょいちょい", "そこそこ", "売れ筋", "ベストセラー"]
    positions = [order.index(Book(sales=s).rank()) for s in range(0, 20001, 7)]
    assert positions == sorted(positions)


def test_create_all_builds_books_and_shops_tables(engine):
    assert sorted(inspect(engine).get_table_names()) == ["books", "shops"]


def test_entities_persist_and_reload(engine):
    with Session(engine) as session:
        session.add(Shop(shop_name="corner", shop_description="small shop"))
        session.add(Book(book_name="novel", book_description="long", sales=4242))
        session.commit()

    with Session(engine) as session:
        shop = session.query(Shop).one()
        book = session.query(Book).one()
        assert (shop.id, shop.shop_name, shop.shop_description) == (
            1,
            "corner",
            "small shop",
        )
        assert (book.id, book.book_name, book.book_description, book.sales) == (
            1,
            "novel",
            "long",
            4242,
        )
        assert book.rank() == "売れ筋"


def test_entity_attributes_roundtrip():
    shop = Shop(shop_name="corner", shop_description="small shop")
    book = Book(book_name="novel", book_description="long", sales=42)
    assert (shop.shop_name, shop.shop_description) == ("corner", "small shop")
    assert (book.book_name, book.book_description, book.sales) == ("novel", "long", 42)