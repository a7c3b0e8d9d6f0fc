# celsius_farenheit.py
# Python implementation of the Celsius/Farenheit converter exercise
import math
import sys
from decimal import Decimal

# Accepted scale names (case-sensitive, "Farenheit" spelling is the accepted one)
CELSIUS = "Celsius"
FARENHEIT = "Farenheit"

PROMPT = "Please choose the value you want to convert and if its Celsius or Farenheit:"
INVALID_NUMBER_MESSAGE = "Invalid input. The first word should be a number."
INVALID_SCALE_MESSAGE = "Sorry, this temperature scale is invalid!"

def celsius_to_farenheit(celsius):
    return 1.8 * celsius + 32.0

def farenheit_to_celsius(farenheit):
    # 0.556, not 5/9: expected outputs are computed with this constant
    return 0.556 * (farenheit - 32.0)

def parse_number(token):
    """Parse a float literal, returning None when the word is not a number."""
    # float() would also take digit-group underscores and non-ASCII digits
    if "_" in token or not token.isascii():
        return None
    try:
        return float(token)
    except ValueError:
        return None

def parse_input(line):
    """Split one line of input into (value, scale).

    The first word is the number, the rest of the words joined by single
    spaces is the scale name. value is None if the first word is missing or
    is not a number.
    """
    parts = line.split()
    if not parts:
        return None, ""
    return parse_number(parts[0]), " ".join(parts[1:])

def format_value(value):
    """Format the input value unrounded, without a trailing '.0' or exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text

def format_converted(value):
    if math.isnan(value):
        return "NaN"
    return f"{value:.2f}"

def convert(line):
    """Return the output line for one line of user input."""
    value, scale = parse_input(line)
    if value is None:
        return INVALID_NUMBER_MESSAGE

    if scale == CELSIUS:
        return (f"{format_value(value)} Celsius degrees is equivalent to "
                f"{format_converted(celsius_to_farenheit(value))} Farenheit degrees.")
    elif scale == FARENHEIT:
        return (f"{format_value(value)} Farenheit degrees is equivalent to "
                f"{format_converted(farenheit_to_celsius(value))} Celsius degrees.")
    else:
        return INVALID_SCALE_MESSAGE

def main():
    # Prompt goes to stderr so stdout carries only the result line
    print(PROMPT, file=sys.stderr)
    line = sys.stdin.readline()
    print(convert(line))
    return 0

if __name__ == "__main__":
    sys.exit(main())
