"""
Tolerant JSON-with-comments loading.

Windows Terminal's settings.json allows // and /* */ comments and trailing
commas. Both are removed before handing the text to the json module.
Comments are not preserved.
"""

from __future__ import annotations
import json
import re
from pathlib import Path
from typing import Any, Optional

# A complete string literal, or a comma followed only by whitespace and a closer
_TRAILING_COMMA_RE = re.compile(r'"(?:[^"\\]|\\.)*"|,(\s*[}\]])', re.DOTALL)


class JSONCParseError(ValueError):
    """The document is not valid JSON even after stripping."""

    def __init__(self, message: str, path: Optional[Path | str] = None):
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{self.path}: {message}"
        super().__init__(message)


def strip_comments(text: str) -> str:
    """
    Remove // and /* */ comments that are not inside string literals.

    A line comment stops before its newline. An unterminated block
    comment swallows the rest of the document.
    """
    out = []
    in_string = False
    escaped = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if escaped:
            out.append(char)
            escaped = False
            i += 1
            continue

        if char == "\\" and in_string:
            out.append(char)
            escaped = True
            i += 1
            continue

        if char == '"':
            in_string = not in_string
            out.append(char)
            i += 1
            continue

        if not in_string and char == "/" and i + 1 < n:
            next_char = text[i + 1]
            if next_char == "/":
                newline = text.find("\n", i)
                i = n if newline == -1 else newline
                continue
            if next_char == "*":
                closer = text.find("*/", i + 2)
                i = n if closer == -1 else closer + 2
                continue

        out.append(char)
        i += 1

    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    """Drop commas directly before '}' or ']', leaving string literals alone."""

    def replace(match: re.Match) -> str:
        return match.group(1) if match.group(1) is not None else match.group(0)

    return _TRAILING_COMMA_RE.sub(replace, text)


def loads(text: str, path: Optional[Path | str] = None) -> Any:
    """
    Parse a JSONC document.

    Raises:
        JSONCParseError: naming path when the cleaned text is still invalid
    """
    cleaned = strip_trailing_commas(strip_comments(text))
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise JSONCParseError(str(e), path) from e
