"""English words for whole amounts, used on receipts and statements."""

from decimal import Decimal, ROUND_HALF_UP

ONES = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
TEENS = [
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
]
TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]
SCALES = ["", "thousand", "million", "billion", "trillion"]


def _chunk_to_words(n: int) -> str:
    """Words for 1..999"""
    words = []

    hundreds, remainder = divmod(n, 100)
    if hundreds:
        words.append(f"{ONES[hundreds]} hundred")

    if remainder >= 20:
        tens, unit = divmod(remainder, 10)
        words.append(f"{TENS[tens]}-{ONES[unit]}" if unit else TENS[tens])
    elif remainder >= 10:
        words.append(TEENS[remainder - 10])
    elif remainder:
        words.append(ONES[remainder])

    return " ".join(words)


def number_to_words(num: int) -> str:
    """
    Convert a non-negative integer to English words (short scale).

    >>> number_to_words(123456)
    'one hundred twenty-three thousand four hundred fifty-six'

    Raises:
        ValueError: If num is negative, not an integer, or beyond the trillions
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise ValueError(f"Expected an integer, got {num!r}")
    if num < 0:
        raise ValueError("Negative amounts cannot be written in words")
    if num == 0:
        return "zero"

    parts = []
    scale_index = 0
    while num > 0:
        if scale_index >= len(SCALES):
            raise ValueError("Amount too large to write in words")
        num, chunk = divmod(num, 1000)
        if chunk:
            scale = SCALES[scale_index]
            parts.append(f"{_chunk_to_words(chunk)} {scale}" if scale else _chunk_to_words(chunk))
        scale_index += 1

    return " ".join(reversed(parts))


def amount_to_words(amount) -> str:
    """
    Words for a money amount: whole units in words, minor units as NN/100.
    Negative amounts (refunds, reversals) are prefixed with "minus".

    >>> amount_to_words(Decimal("1250.50"))
    'one thousand two hundred fifty and 50/100'
    >>> amount_to_words(Decimal("-0.50"))
    'minus zero and 50/100'
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "minus " if value < 0 else ""
    value = abs(value)
    whole = int(value)
    cents = int((value - whole) * 100)
    words = sign + number_to_words(whole)
    if cents:
        return f"{words} and {cents:02d}/100"
    return words
