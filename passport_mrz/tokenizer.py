from __future__ import annotations

import re

FILLER = "<"

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def join_lines(text: str) -> str:
    """Glue the two TD3 lines together, dropping only CR/LF line breaks between them."""
    return _LINE_BREAK.sub("", text)


def tokenize(text: str, filler: str = FILLER) -> list[str]:
    # Empty tokens between consecutive fillers are kept, downstream offsets rely on them.
    return text.split(filler)
