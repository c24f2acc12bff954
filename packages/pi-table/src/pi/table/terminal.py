"""Terminal width detection."""

from __future__ import annotations

import os
import sys
from typing import TextIO


def detect_terminal_width(stream: TextIO | None = None) -> int | None:
    """Return the column count of the terminal behind *stream*.

    *stream* defaults to ``sys.stdout``.  Returns ``None`` when the stream is
    not attached to a terminal (piped output, files, test capture) since
    there is then no meaningful width to fit into.
    """
    if stream is None:
        stream = sys.stdout
    if stream is None:
        return None
    try:
        if not stream.isatty():
            return None
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return None
