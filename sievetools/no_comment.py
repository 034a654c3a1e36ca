"""Remove C-style comments from a file or from standard input."""

import argparse
import enum
import sys
from collections.abc import Iterable, Iterator

from .errors import FatalError, format_error

__all__ = ["UnterminatedError", "strip_comments", "main"]


class _State(enum.IntEnum):
    CODE = 0
    SLASH = 1
    LINE_COMMENT = 2
    LINE_BACKSLASH = 3
    LINE_CONTINUED = 4
    BLOCK_COMMENT = 5
    BLOCK_STAR = 6
    DOUBLE_QUOTE = 7
    DOUBLE_ESCAPE = 8
    SINGLE_QUOTE = 9
    SINGLE_ESCAPE = 10


class UnterminatedError(FatalError):
    """The input ended inside a comment or a quoted literal."""

    def __init__(self, state: int, output: str = ""):
        super().__init__(
            f"state machine ended in state {state}; "
            "does the input contain an unterminated comment?"
        )
        self.state = state
        self.output = output


def _stripped(chars: Iterable[str]) -> Iterator[str]:
    state = _State.CODE
    for c in chars:
        if state is _State.CODE:
            if c == "/":
                state = _State.SLASH
            else:
                if c == '"':
                    state = _State.DOUBLE_QUOTE
                elif c == "'":
                    state = _State.SINGLE_QUOTE
                yield c
        elif state is _State.SLASH:
            if c == "/":
                state = _State.LINE_COMMENT
            elif c == "*":
                state = _State.BLOCK_COMMENT
            else:
                state = _State.CODE
                yield "/" + c
        elif state is _State.LINE_COMMENT:
            if c == "\n":
                state = _State.CODE
                yield "\n"
            elif c == "\\":
                state = _State.LINE_BACKSLASH
        elif state is _State.LINE_BACKSLASH:
            if c == "\n":
                state = _State.LINE_CONTINUED
            elif c != "\\":
                state = _State.LINE_COMMENT
        elif state is _State.LINE_CONTINUED:
            if c == "\\":
                state = _State.LINE_BACKSLASH
            elif c == "\n":
                state = _State.CODE
                yield "\n"
            else:
                state = _State.LINE_COMMENT
        elif state is _State.BLOCK_COMMENT:
            if c == "*":
                state = _State.BLOCK_STAR
        elif state is _State.BLOCK_STAR:
            if c == "/":
                state = _State.CODE
                yield " "
            elif c != "*":
                state = _State.BLOCK_COMMENT
        elif state is _State.DOUBLE_QUOTE:
            if c == "\\":
                state = _State.DOUBLE_ESCAPE
            elif c == '"':
                state = _State.CODE
            yield c
        elif state is _State.DOUBLE_ESCAPE:
            state = _State.DOUBLE_QUOTE
            yield c
        elif state is _State.SINGLE_QUOTE:
            if c == "\\":
                state = _State.SINGLE_ESCAPE
            elif c == "'":
                state = _State.CODE
            yield c
        elif state is _State.SINGLE_ESCAPE:
            state = _State.SINGLE_QUOTE
            yield c
    if state is not _State.CODE:
        raise UnterminatedError(int(state))


def strip_comments(text: str) -> str:
    """Return ``text`` with ``//`` and ``/* */`` comments removed.

    A block comment becomes a single space; a line comment keeps its final
    newline.  Raises :class:`UnterminatedError`, carrying the output produced
    so far, if the text ends inside a comment or a literal.
    """
    pieces: list[str] = []
    try:
        for piece in _stripped(text):
            pieces.append(piece)
    except UnterminatedError as exc:
        exc.output = "".join(pieces)
        raise
    return "".join(pieces)


def _read_input(path: str | None) -> str:
    if path is None:
        return sys.stdin.buffer.read().decode("latin-1")
    try:
        with open(path, "rb") as handle:
            return handle.read().decode("latin-1")
    except OSError as exc:
        raise FatalError(f"file {path} is not accessible") from exc


def main(argv=None) -> int:
    """Write the comment-free contents of a file (or stdin) to stdout."""
    parser = argparse.ArgumentParser(
        prog="no-comment", description="Remove C-style comments from a file."
    )
    parser.add_argument("paths", nargs="*", metavar="file")
    args = parser.parse_args(argv)

    out = sys.stdout.buffer
    try:
        if len(args.paths) > 1:
            raise FatalError("too many arguments")
        text = _read_input(args.paths[0] if args.paths else None)
        try:
            for piece in _stripped(text):
                out.write(piece.encode("latin-1"))
        finally:
            out.flush()
    except FatalError as exc:
        print(format_error("%s", exc), file=sys.stderr)
        return 1
    return 0