"""Unit tests for the pipe-delimited line codecs and file persistence."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

import pytest

from recordbook.domain.entities import Movie, Recipe, Room, Transaction
from recordbook.domain.exceptions import RecordFileNotFoundError, RecordParseError, ValidationError
from recordbook.infrastructure.codecs import MovieCodec, RecipeCodec, RoomCodec, TransactionCodec
from recordbook.infrastructure.codecs.fields import parse_bool, split_list
from recordbook.infrastructure.storage import InMemoryRecordStore, read_records, write_records
from recordbook.infrastructure.storage.delimited_file import decode_line, encode_line


# ── Field conversions ────────────────────────────────────────────────


def test_parse_bool_is_caseless():
    assert parse_bool("True") is True
    assert parse_bool("false") is False
    assert parse_bool(" TRUE ") is True
    with pytest.raises(ValueError):
        parse_bool("yes")


def test_split_list_empty_field_is_empty_list():
    assert split_list("") == []
    assert split_list("flour, milk ,eggs") == ["flour", "milk", "eggs"]


# ── Line codecs ──────────────────────────────────────────────────────


def test_transaction_line_layout():
    t = Transaction("Coffee", Decimal("4.50"), True, "Food", datetime(2024, 1, 2, 8, 30))
    assert encode_line(t, TransactionCodec()) == "Coffee|4.50|True|Food|2024-01-02T08:30:00"


def test_transaction_line_decodes_lowercase_bool():
    t = decode_line("Salary|2000|false|Job|2024-01-31T09:00:00", TransactionCodec())
    assert t.is_expense is False
    assert t.amount == Decimal("2000")
    assert t.date == datetime(2024, 1, 31, 9, 0)


def test_recipe_line_layout_uses_numeric_favorite_flag():
    recipe = Recipe(
        "Pancakes", ("flour", "milk"), "Mix and fry", "Breakfast", "350 kcal", (4, 5), True
    )
    assert encode_line(recipe, RecipeCodec()) == (
        "Pancakes|flour,milk|Mix and fry|Breakfast|350 kcal|4,5|1"
    )


def test_recipe_line_with_no_ratings():
    recipe = decode_line("Toast|bread|Toast it|Breakfast|info||0", RecipeCodec())
    assert recipe.ratings == ()
    assert recipe.is_favorite is False


def test_recipe_line_with_out_of_range_rating_is_rejected():
    with pytest.raises(RecordParseError):
        decode_line("Toast|bread|Toast it|Breakfast|info|4,9|0", RecipeCodec())


def test_wrong_field_count_is_rejected():
    with pytest.raises(RecordParseError) as excinfo:
        decode_line("101|Single|100.0", RoomCodec(), line_no=3)
    assert excinfo.value.line_no == 3


def test_unparsable_number_is_rejected():
    with pytest.raises(RecordParseError):
        decode_line("abc|Single|100.0|True", RoomCodec())


def test_room_line_with_non_finite_price_is_rejected():
    for price in ("inf", "-inf", "nan"):
        with pytest.raises(RecordParseError):
            decode_line(f"101|Single|{price}|True", RoomCodec())


def test_encode_refuses_field_containing_delimiter_or_line_break():
    with pytest.raises(ValidationError):
        encode_line(Transaction("Rent|June", Decimal("900"), True, "Home"), TransactionCodec())
    with pytest.raises(ValidationError):
        encode_line(Room(101, "Single\nSea view", 100.0), RoomCodec())


def test_encode_refuses_list_item_containing_comma():
    recipe = Recipe("Salad", ("salt, pepper", "lettuce"), "Toss", "Lunch", "")
    with pytest.raises(ValidationError):
        encode_line(recipe, RecipeCodec())


def test_room_and_movie_lines():
    assert encode_line(Room(101, "Single", 100.0), RoomCodec()) == "101|Single|100.0|True"
    movie = decode_line("7|Alien|Sci-Fi|False", MovieCodec())
    assert movie == Movie(7, "Alien", "Sci-Fi", is_available=False)


# ── Files ────────────────────────────────────────────────────────────


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "nested" / "rooms.txt"
    rooms = [Room(101, "Single", 100.0), Room(102, "Double", 150.5, is_available=False)]
    assert write_records(path, rooms, RoomCodec()) == 2
    assert read_records(path, RoomCodec()) == rooms


def test_write_truncates_existing_file(tmp_path):
    path = tmp_path / "rooms.txt"
    write_records(path, [Room(1, "A", 1.0), Room(2, "B", 2.0)], RoomCodec())
    write_records(path, [Room(3, "C", 3.0)], RoomCodec())
    assert path.read_text(encoding="utf-8") == "3|C|3.0|True\n"


def test_read_skips_malformed_and_blank_lines(tmp_path):
    path = tmp_path / "movies.txt"
    path.write_text(
        "1|Alien|Sci-Fi|True\n"
        "\n"
        "garbage line\n"
        "x|Heat|Crime|True\n"
        "3|Up|Animation|maybe\n"
        "4|Heat|Crime|false\n",
        encoding="utf-8",
    )
    movies = read_records(path, MovieCodec())
    assert [m.movie_id for m in movies] == [1, 4]


def test_read_strict_raises_on_first_bad_line(tmp_path):
    path = tmp_path / "movies.txt"
    path.write_text("1|Alien|Sci-Fi|True\nbad\n", encoding="utf-8")
    with pytest.raises(RecordParseError) as excinfo:
        read_records(path, MovieCodec(), strict=True)
    assert excinfo.value.line_no == 2


def test_read_skips_line_that_is_not_utf8(tmp_path):
    path = tmp_path / "transactions.txt"
    path.write_bytes(
        b"Coffee|4.50|True|Food|2024-01-02T08:30:00\n"
        b"Caf\xe9|3.00|True|Food|2024-01-03T08:30:00\n"
        b"Salary|2000|False|Job|2024-01-31T09:00:00\n"
    )
    transactions = read_records(path, TransactionCodec())
    assert [t.description for t in transactions] == ["Coffee", "Salary"]


def test_read_strict_raises_on_line_that_is_not_utf8(tmp_path):
    path = tmp_path / "movies.txt"
    path.write_bytes(b"1|Alien|Sci-Fi|True\n2|Am\xe9lie|Drama|True\n")
    with pytest.raises(RecordParseError) as excinfo:
        read_records(path, MovieCodec(), strict=True)
    assert excinfo.value.line_no == 2


def test_read_keeps_valid_non_ascii_text(tmp_path):
    path = tmp_path / "movies.txt"
    path.write_text("2|Am\u00e9lie|Drama|True\n", encoding="utf-8")
    assert read_records(path, MovieCodec())[0].title == "Am\u00e9lie"


def test_write_with_unsavable_record_leaves_file_alone(tmp_path):
    path = tmp_path / "rooms.txt"
    path.write_text("1|A|1.0|True\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        write_records(path, [Room(2, "B", 2.0), Room(3, "C|D", 3.0)], RoomCodec())
    assert path.read_text(encoding="utf-8") == "1|A|1.0|True\n"


def test_read_missing_file(tmp_path):
    with pytest.raises(RecordFileNotFoundError) as excinfo:
        read_records(tmp_path / "nope.txt", MovieCodec())
    assert "nope.txt" in excinfo.value.path


# ── Store persistence ────────────────────────────────────────────────


def test_store_save_then_load_into_empty_store(tmp_path):
    path = tmp_path / "transactions.txt"
    source = InMemoryRecordStore[Transaction]("Transaction", codec=TransactionCodec())
    source.add(Transaction("Coffee", Decimal("4.50"), True, "Food", datetime(2024, 1, 2)))
    source.add(Transaction("Salary", Decimal("2000"), False, "Job", datetime(2024, 1, 31)))
    assert source.save_to_file(path) == 2

    target = InMemoryRecordStore[Transaction]("Transaction", codec=TransactionCodec())
    assert target.load_from_file(path) == 2
    assert target.list_records() == source.list_records()


def test_store_load_appends(tmp_path):
    path = tmp_path / "movies.txt"
    path.write_text("2|Heat|Crime|True\n", encoding="utf-8")
    store = InMemoryRecordStore[Movie]("Movie", codec=MovieCodec())
    store.add(Movie(1, "Alien", "Sci-Fi"))
    store.load_from_file(path)
    assert [m.movie_id for m in store.list_records()] == [1, 2]


def test_store_strict_load_failure_leaves_store_untouched(tmp_path):
    path = tmp_path / "movies.txt"
    path.write_text("2|Heat|Crime|True\nbad\n", encoding="utf-8")
    store = InMemoryRecordStore[Movie]("Movie", codec=MovieCodec())
    with pytest.raises(RecordParseError):
        store.load_from_file(path, strict=True)
    assert len(store) == 0


def test_store_refuses_record_its_codec_cannot_save():
    store = InMemoryRecordStore[Transaction]("Transaction", codec=TransactionCodec())
    with pytest.raises(ValidationError):
        store.add(Transaction("Rent|June", Decimal("900"), True, "Home"))
    assert len(store) == 0


def test_store_update_refuses_unsavable_replacement():
    store = InMemoryRecordStore[Recipe]("Recipe", codec=RecipeCodec())
    store.add(Recipe("Salad", ("lettuce",), "Toss", "Lunch", ""))
    with pytest.raises(ValidationError):
        store.update_by_key("Salad", lambda r: replace(r, instructions="Toss\nServe"))
    assert store.get_by_key("Salad").instructions == "Toss"


def test_store_without_codec_accepts_any_text():
    store = InMemoryRecordStore[Movie]("Movie")
    store.add(Movie(1, "Alien|Director's Cut", "Sci-Fi"))
    assert len(store) == 1
