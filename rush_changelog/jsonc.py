"""JSON-with-comments reading utilities.

Rush configuration files (rush.json, CHANGELOG.json) are allowed to carry
``//`` and ``/* */`` comments. The standard json module rejects those, so
comments are blanked out before parsing. Replaced characters become spaces
and newlines are kept, so parser error positions still point at the right
line and column of the original file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def strip_json_comments(text: str) -> str:
    """Remove line and block comments that sit outside JSON strings.

    Examples:
        '{"a": 1} // x' → '{"a": 1}     '
        '{"url": "http://x"}' → unchanged (inside a string)
    """
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False

    while i < n:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                # Keep the escaped character verbatim, even if it is a quote
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            if end == -1:
                end = n
            out.append(" " * (end - i))
            i = end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            # An unterminated block comment runs to the end of the file
            end = n if end == -1 else end + 2
            out.append(_blank(text[i:end]))
            i = end
        else:
            out.append(ch)
            i += 1

    return "".join(out)


def _blank(chunk: str) -> str:
    """Replace every character except line breaks with a space."""
    return "".join(c if c in "\r\n" else " " for c in chunk)


def read_jsonc(path: Path) -> Any:
    """Read and parse a JSON file that may contain comments.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    text = path.read_text(encoding="utf-8-sig")
    return json.loads(strip_json_comments(text))
