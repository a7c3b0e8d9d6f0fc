import pytest

from exercises.the_twelve_days_of_christmas import christmas
from exercises.the_twelve_days_of_christmas.christmas import ITEMS, ORDINAL_NUMBERS, verse, verses


def test_tables_have_twelve_entries():
    assert len(ORDINAL_NUMBERS) == 12
    assert len(ITEMS) == 12
    assert ITEMS[0] == "Partridge in a Pear Tree"


def test_first_day_has_no_and():
    first = verse(0)
    assert first == "On the first day of Christmas my true love sent to me a Partridge in a Pear Tree."
    assert " and " not in first


def test_second_day():
    assert verse(1) == ("On the second day of Christmas my true love sent to me "
                        "Two Turtle Doves and a Partridge in a Pear Tree.")


def test_third_day_uses_comma_before_second_item():
    assert verse(2) == ("On the third day of Christmas my true love sent to me "
                        "Three French Hens, Two Turtle Doves and a Partridge in a Pear Tree.")


def test_every_verse_ends_with_partridge():
    for day, text in enumerate(verses()):
        assert text.startswith(f"On the {ORDINAL_NUMBERS[day]} day of Christmas")
        assert text.endswith("a Partridge in a Pear Tree.")


def test_last_verse_lists_items_in_descending_order():
    text = verse(11)
    positions = [text.index(item) for item in reversed(ITEMS)]
    assert positions == sorted(positions)
    assert text.count(", ") == 10


@pytest.mark.parametrize("day", [-1, 12])
def test_rejects_days_out_of_range(day):
    with pytest.raises(ValueError):
        verse(day)


def test_main_prints_verses_separated_by_blank_lines(capsys):
    assert christmas.main() == 0
    out = capsys.readouterr().out
    blocks = out.split("\n\n")
    assert [block.strip() for block in blocks if block.strip()] == list(verses())
    assert out.endswith(".\n\n")
