"""
Stateless reformatting helpers for ID lists, sharing the batch splitter.
"""
from batch import COMMA, NEWLINE, apply, detect_delimiter, split_items
from core_logic import EmptyInput

QUOTE = "'"
FULLWIDTH_COMMA = "，"


def _require(text: str) -> None:
    if not text:
        raise EmptyInput()


def convert_format(text: str) -> str:
    """Swaps a comma-separated list to one item per line, and back."""
    _require(text)
    target = COMMA if detect_delimiter(text) == NEWLINE else NEWLINE
    return target.join(split_items(text))


def replace_fullwidth_commas(text: str) -> str:
    _require(text)
    return text.replace(FULLWIDTH_COMMA, COMMA)


def _quote(item: str) -> str:
    if item.startswith(QUOTE) or item.endswith(QUOTE):
        return item
    return f"{QUOTE}{item}{QUOTE}"


def _unquote(item: str) -> str:
    if len(item) >= 2 and item.startswith(QUOTE) and item.endswith(QUOTE):
        return item[1:-1]
    return item


def add_quotes(text: str) -> str:
    _require(text)
    return apply(text, _quote)


def remove_quotes(text: str) -> str:
    _require(text)
    return apply(text, _unquote)


OPERATIONS = {
    "convert": convert_format,
    "replace-commas": replace_fullwidth_commas,
    "add-quotes": add_quotes,
    "remove-quotes": remove_quotes,
}
