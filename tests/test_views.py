import pytest

from bookshop_api import views
from bookshop_api.entities import Book, Shop

BESTSELLER = "ベストセラー"
POPULAR = "売れ筋"
MODERATE = "そこそこ"
OCCASIONAL = "ちょいちょい"


def _shop():
    return Shop(id=1, shop_name="test shop name", shop_description="test shop description")


def test_render_shop_matches_wire_format():
    assert views.render_shop(_shop()) == {
        "id": 1,
        "shop_name": "test shop name",
        "shop_description": "test shop description",
    }


def test_render_shops_wraps_list():
    assert views.render_shops([_shop()]) == {"shops": [views.shop_to_dict(_shop())]}


def test_render_empty_lists():
    assert views.render_shops([]) == {"shops": []}
    assert views.render_books([]) == {"books": []}


def test_blank_shop_uses_zero_values():
    assert views.shop_to_dict(Shop()) == {"id": 0, "shop_name": "", "shop_description": ""}


@pytest.mark.parametrize(
    "sales, rank",
    [
        (10001, BESTSELLER),
        (10000, POPULAR),
        (1001, POPULAR),
        (101, MODERATE),
        (11, OCCASIONAL),
        (10, None),
        (0, None),
    ],
)
def test_render_book_includes_rank(sales, rank):
    book = Book(id=3, book_name="n", book_description="d", sales=sales)
    assert views.render_book(book) == {
        "id": 3,
        "book_name": "n",
        "book_description": "d",
        "sales": sales,
        "rank": rank,
    }


def test_render_books_preserves_order():
    books = [Book(id=2, sales=0), Book(id=1, sales=0)]
    assert [item["id"] for item in views.render_books(books)["books"]] == [2, 1]