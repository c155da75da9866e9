"""Block string value normalisation as defined by the GraphQL specification."""

from __future__ import annotations


def leading_whitespace(text: str) -> int:
    """Return the number of leading tab and space characters."""
    count = 0
    for char in text:
        if char not in ("\t", " "):
            break
        count += 1
    return count


def is_blank(text: str) -> bool:
    """Return True if the text is empty or consists of tabs and spaces only."""
    return leading_whitespace(text) == len(text)


def block_string_indentation(lines: list[str]) -> int:
    """Return the common indentation of all non-blank lines after the first."""
    common: int | None = None
    for line in lines[1:]:
        indent = leading_whitespace(line)
        if indent == len(line):
            continue
        if indent == 0:
            return 0
        if common is None or indent < common:
            common = indent
    return common or 0


def block_string(raw: str) -> str:
    """Produce the value of a block string from its raw contents."""
    lines = raw.split("\n")

    indent = block_string_indentation(lines)
    if indent > 0:
        lines = lines[:1] + [
            "" if len(line) < indent else line[indent:] for line in lines[1:]
        ]

    start = 0
    while start < len(lines) and is_blank(lines[start]):
        start += 1
    lines = lines[start:]

    end = len(lines)
    while end - 1 > 0 and is_blank(lines[end - 1]):
        end -= 1
    lines = lines[:end]

    return "\n".join(lines)