"""Comment removal applied to raw schema text before parsing."""

import re


LINE_COMMENT = re.compile(r"//[^\n]*")
BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def strip_comments(raw: str) -> str:
    """
    Remove ``//`` line comments, then ``/* ... */`` block comments.

    The newline ending a line comment is kept. String literals are not
    recognized, so comment markers inside them are stripped too.

    Args:
        raw: Schema text as read from disk.

    Returns:
        Text ready for :func:`grammar.parser.parse`.
    """
    text = LINE_COMMENT.sub("", raw)
    return BLOCK_COMMENT.sub("", text)
