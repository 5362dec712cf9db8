"""Writing characters, strings and numbers straight to file descriptors."""

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write a single character to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(text: str, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode())


def putendl_fd(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, text.encode() + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(int(n)).encode())