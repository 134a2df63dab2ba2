"""Estimated reading time for markdown content.

The estimate sums per-element reading costs in seconds and converts to whole
minutes, rounding up, with a floor of one minute:

* CJK ideograph: 60 / 350 s (350 characters per minute)
* Latin word, outside code: 60 / 180 s (180 words per minute)
* line inside a fenced code block: four times the CJK cost
* image: 12 s
* math expression, block or inline: 15 s
* table row: 10 s
* list item: 3 s
"""

import math
import re

CJK_SECONDS = 0.171
WORD_SECONDS = 0.333
CODE_LINE_SECONDS = CJK_SECONDS * 4
IMAGE_SECONDS = 12
MATH_SECONDS = 15
TABLE_ROW_SECONDS = 10
LIST_ITEM_SECONDS = 3

CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")
WORD_PATTERN = re.compile(r"\b[a-zA-Z]+\b", re.ASCII)
IMAGE_PATTERN = re.compile(r"!\[[^\]]*\]\([^)]*\)")
CODE_BLOCK_PATTERN = re.compile(r"```[\s\S]*?```")
INLINE_CODE_PATTERN = re.compile(r"`[^`]+`")
MATH_BLOCK_PATTERN = re.compile(r"\$\$[^$]+\$\$")
MATH_INLINE_PATTERN = re.compile(r"(?<!\$)\$[^\n$]+\$(?!\$)")
TABLE_ROW_PATTERN = re.compile(r"^\|.*\|$", re.MULTILINE)
LIST_ITEM_PATTERN = re.compile(r"^(?:[-*+•]|\d+\.)\s+.*$", re.MULTILINE)


def _count(pattern: re.Pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def _count_code_lines(text: str) -> int:
    return sum(len(block.split("\n")) for block in CODE_BLOCK_PATTERN.findall(text))


def estimate_minutes(markup: str | None) -> int:
    """Return the estimated reading time of ``markup`` in minutes (at least 1)."""
    if not markup or not markup.strip():
        return 1

    text = markup.replace("\r\n", "\n")

    cjk_count = _count(CJK_PATTERN, text)

    # words are counted on prose only
    prose = INLINE_CODE_PATTERN.sub("", CODE_BLOCK_PATTERN.sub("", text))
    word_count = _count(WORD_PATTERN, prose)

    code_line_count = _count_code_lines(text)
    image_count = _count(IMAGE_PATTERN, text)
    math_count = _count(MATH_BLOCK_PATTERN, text) + _count(MATH_INLINE_PATTERN, text)
    table_row_count = _count(TABLE_ROW_PATTERN, text)
    list_item_count = _count(LIST_ITEM_PATTERN, text)

    seconds = (
        cjk_count * CJK_SECONDS
        + word_count * WORD_SECONDS
        + code_line_count * CODE_LINE_SECONDS
        + image_count * IMAGE_SECONDS
        + math_count * MATH_SECONDS
        + table_row_count * TABLE_ROW_SECONDS
        + list_item_count * LIST_ITEM_SECONDS
    )
    return max(1, math.ceil(seconds / 60))
