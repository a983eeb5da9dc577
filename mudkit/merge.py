"""Merge two "#number"-keyed area files, records of the new file replacing those of the old."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

_RECORD = re.compile(r"\s*#\s*([+-]?\d+)")


class MergeError(Exception):
    """The input files are not in the numbered record format."""


def _record_number(line: str) -> int | None:
    match = _RECORD.match(line)
    return int(match.group(1)) if match else None


def _next_line(lines: Iterator[str], which: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise MergeError(f"Unexpected end of the {which} file") from None


def _expect_header(lines: Iterator[str], message: str) -> int:
    line = next(lines, None)
    number = None if line is None else _record_number(line)
    if number is None:
        raise MergeError(message)
    return number


def _read_body(lines: Iterator[str], which: str) -> tuple[list[str], int]:
    """Read lines up to the next record header; return them and its number."""
    body = []
    while True:
        line = _next_line(lines, which)
        number = _record_number(line)
        if number is not None:
            return body, number
        body.append(line)


def merge(new_lines: Iterable[str], old_lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines of both files merged in record-number order.

    Both inputs hold records that start with a ``#number`` line and end the
    file with a line starting with ``$``. Where both files hold a record of
    the same number, the one from ``new_lines`` is kept.
    """
    new = iter(new_lines)
    old = iter(old_lines)

    num1 = _expect_header(new, "No #xxxx found next (old)")
    num2 = _expect_header(old, "No #xxxx found next (new)")
    buf1 = _next_line(new, "new")
    buf2 = _next_line(old, "old")

    while True:
        if buf1.startswith("$"):
            yield f"#{num2}\n"
            yield buf2
            yield from old
            return
        if buf2.startswith("$"):
            yield f"#{num1}\n"
            yield buf1
            yield from new
            return

        if num1 < num2:
            yield f"#{num1}\n"
            yield buf1
            body, num1 = _read_body(new, "new")
            yield from body
            buf1 = _next_line(new, "new")
        elif num1 == num2:
            yield f"#{num1}\n"
            yield buf1
            body, num1 = _read_body(new, "new")
            yield from body
            _, num2 = _read_body(old, "old")
            buf1 = _next_line(new, "new")
            buf2 = _next_line(old, "old")
        else:
            yield f"#{num2}\n"
            yield buf2
            body, num2 = _read_body(old, "old")
            yield from body
            buf2 = _next_line(old, "old")


def merge_files(new_path: str, old_path: str, out: TextIO) -> None:
    """Merge the file at ``new_path`` into the one at ``old_path``, writing to ``out``."""
    try:
        new_file = open(new_path, encoding="latin-1", newline="")
    except OSError as exc:
        raise MergeError("Could not open the builders file.") from exc
    with new_file:
        try:
            old_file = open(old_path, encoding="latin-1", newline="")
        except OSError as exc:
            raise MergeError("Could not open 'old' file.") from exc
        with old_file:
            out.writelines(merge(new_file, old_file))


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``<new merge file> <old merge file>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage : insert_any <New Merge File> <Old Merge File>")
        print("Both files must use # numbering system, and terminate with $~")
        return 0
    try:
        merge_files(args[0], args[1], sys.stdout)
    except MergeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())