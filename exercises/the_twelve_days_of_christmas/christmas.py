# christmas.py
# Python implementation of the "Twelve Days of Christmas" exercise
import sys

ORDINAL_NUMBERS = (
    "first", "second", "third",
    "fourth", "fifth", "sixth",
    "seventh", "eighth", "ninth",
    "tenth", "eleventh", "twelfth",
)

ITEMS = (
    "Partridge in a Pear Tree", "Two Turtle Doves", "Three French Hens",
    "Calling Birds", "Gold Rings", "Geese a-Laying",
    "Swans a-Swimming", "Maids a-Milking", "Ladies Dancing",
    "Lords a-Leaping", "Pipers Piping", "Drummers Drumming",
)

def verse(day):
    """Build the verse for a 0-indexed day (0 is the first day)."""
    if not 0 <= day < len(ITEMS):
        raise ValueError(f"day must be between 0 and {len(ITEMS) - 1}, got {day}")

    paragraph = f"On the {ORDINAL_NUMBERS[day]} day of Christmas my true love sent to me "

    # Gifts counting down; the one just before the partridge takes no comma
    for j in range(day, 0, -1):
        if j == 1:
            paragraph += f"{ITEMS[j]} "
        else:
            paragraph += f"{ITEMS[j]}, "

    if day == 0:
        paragraph += f"a {ITEMS[0]}."
    else:
        paragraph += f"and a {ITEMS[0]}."
    return paragraph

def verses():
    for day in range(len(ITEMS)):
        yield verse(day)

def main():
    for paragraph in verses():
        print(f"{paragraph}\n")
    return 0

if __name__ == "__main__":
    sys.exit(main())
