"""Byte-buffer primitives working on bytearray and memoryview objects."""

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(count: int, *buffers: ReadableBuffer) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: Buffer, value: int, count: int) -> Buffer:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: Buffer, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def memcpy(dest: Buffer, src: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes from ``src`` to ``dest``; the regions may overlap."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memchr(data: ReadableBuffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Difference of the first differing byte within ``count`` bytes, else 0."""
    _check_count(count, first, second)
    for a, b in zip(bytes(first[:count]), bytes(second[:count])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)