"""Trim source lines and track C-style comment regions."""

from typing import NamedTuple

BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
LINE_COMMENT = "//"


class NormalizedLine(NamedTuple):
    text: str
    in_comment: bool
    indexable: bool


def normalize_line(raw: str, in_comment: bool) -> NormalizedLine:
    """Trim *raw* and update the comment-mode flag carried across lines.

    The checks run in order and are independent of each other:

    * a line starting with ``/*`` enters comment mode and is itself
      commented, even when it also ends with ``*/``: a one-line
      ``/* note */`` is never indexed, although comment mode is already off
      again once the line has been read;
    * a line ending with ``*/`` leaves comment mode, so it is indexed itself
      unless it also opens the comment;
    * a line starting with ``//`` enters comment mode and nothing but a later
      ``*/`` line leaves it again.

    Only ``/*``, ``*/`` and ``//`` are recognized, whatever the source type.
    A line is indexable when it is outside comment mode and non-empty.
    """
    text = raw.strip()
    opens_block = text.startswith(BLOCK_COMMENT_OPEN)

    if opens_block:
        in_comment = True
    if text.endswith(BLOCK_COMMENT_CLOSE):
        in_comment = False
    # Never reset by a following line; see test_line_comment_mode_persists.
    if text.startswith(LINE_COMMENT):
        in_comment = True

    indexable = not (in_comment or opens_block) and bool(text)
    return NormalizedLine(text, in_comment, indexable)
