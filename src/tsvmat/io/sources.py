# tsvmat/io/sources.py
"""Read matrix sources: a named file or standard input.

Standard input is spooled into a temporary buffer before parsing so that the
whole content is available for validation. The buffer is owned by
:func:`open_source` and released on every exit path, including
``KeyboardInterrupt``.
"""

from __future__ import annotations

import shutil
import sys
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Optional, TextIO

from tsvmat.logging import get_logger
from tsvmat.matrix import Matrix, UnreadableSourceError, parse_matrix
from tsvmat.matrix.errors import STDIN_NAME

# stdin content larger than this rolls over from memory to a temp file
SPOOL_MAX_SIZE = 1024 * 1024
ENCODING = "utf-8"


def source_name(path: Optional[str]) -> str:
    return STDIN_NAME if path is None else str(path)


@contextmanager
def _spooled_stdin(stream: TextIO) -> Iterator[IO[str]]:
    buffer = tempfile.SpooledTemporaryFile(
        max_size=SPOOL_MAX_SIZE, mode="w+", encoding=ENCODING, newline=""
    )
    try:
        shutil.copyfileobj(stream, buffer)
        buffer.seek(0)
        yield buffer
    finally:
        buffer.close()


@contextmanager
def open_source(path: Optional[str] = None, stdin: Optional[TextIO] = None) -> Iterator[IO[str]]:
    """Yield a readable text handle for ``path``, or for stdin when ``path`` is None.

    Raises
    ------
    UnreadableSourceError
        If ``path`` is missing, is a directory or cannot be opened, or if
        standard input is needed but closed.
    """

    if path is None:
        stream = stdin if stdin is not None else sys.stdin
        if stream is None:
            raise UnreadableSourceError(STDIN_NAME, "standard input is closed")
        with _spooled_stdin(stream) as handle:
            yield handle
        return

    target = Path(path)
    if target.is_dir():
        raise UnreadableSourceError(str(path), "is a directory")
    try:
        handle = target.open("r", encoding=ENCODING, newline="")
    except FileNotFoundError as exc:
        raise UnreadableSourceError(str(path), "no such file") from exc
    except OSError as exc:
        raise UnreadableSourceError(str(path), exc.strerror or str(exc)) from exc

    with handle:
        yield handle


def read_source(path: Optional[str] = None, stdin: Optional[TextIO] = None) -> str:
    """Return the full text of a source."""

    try:
        with open_source(path, stdin=stdin) as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise UnreadableSourceError(source_name(path), f"not valid {ENCODING} text") from exc


def read_matrix(path: Optional[str] = None, stdin: Optional[TextIO] = None) -> Matrix:
    """Read and validate the matrix held by ``path`` (or stdin)."""

    name = source_name(path)
    get_logger(__name__).info("reading matrix from %s", name)
    return parse_matrix(read_source(path, stdin=stdin), source=name)
