"""Reading separated-value lines and splitting delimited strings."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TextIO

MAX_LINE_LENGTH = 4096
MAX_FIELDS = 128

# A single read never takes more than this many characters of a line.
_CHUNK = MAX_LINE_LENGTH - 1

_LINE_END = re.compile(r"[\r\n]")


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one line into fields.

    The line is cut at its first carriage return or newline. A field that
    starts with a double quote runs to the next lone quote, with ``""``
    standing for a literal quote. A separator at the very end of the line
    does not produce an empty trailing field. At most ``MAX_FIELDS - 1``
    fields are returned; the rest of the line is ignored.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")

    text = _LINE_END.split(line, maxsplit=1)[0]
    length = len(text)
    fields: list[str] = []
    pos = 0

    while pos < length and len(fields) < MAX_FIELDS - 1:
        if text[pos] == '"':
            pos += 1
            chars: list[str] = []
            while pos < length:
                ch = text[pos]
                if ch == '"':
                    if pos + 1 < length and text[pos + 1] == '"':
                        chars.append('"')
                        pos += 2
                    else:
                        pos += 1
                        break
                else:
                    chars.append(ch)
                    pos += 1
            fields.append("".join(chars))
            if pos < length and text[pos] == separator:
                pos += 1
        else:
            stop = text.find(separator, pos)
            if stop < 0:
                fields.append(text[pos:])
                pos = length
            else:
                fields.append(text[pos:stop])
                pos = stop + 1

    return fields


def read_csv_rows(stream: TextIO, separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of every line read from ``stream``.

    Lines longer than the read limit are taken in pieces, each piece being
    parsed as a row of its own.
    """
    for line in stream:
        while line:
            chunk, line = line[:_CHUNK], line[_CHUNK:]
            yield parse_csv_line(chunk, separator)


def split_string(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``.

    Empty tokens are dropped and spaces are trimmed from both ends of each
    token.
    """
    if delimiters:
        pattern = "[" + "".join(re.escape(ch) for ch in delimiters) + "]"
        tokens = re.split(pattern, text)
    else:
        tokens = [text]
    return [token.strip(" ") for token in tokens if token]