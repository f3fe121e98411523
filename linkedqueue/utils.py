ENCODING = "utf-8"
TERMINATOR = b"\x00"


def to_text(value: str | bytes | bytearray | memoryview) -> str:
    """
    Return an independently owned `str` copy of `value`.

    Bytes-like input is decoded as UTF-8, so later writes to a caller's
    `bytearray` never reach the stored copy. Text that cannot be encoded as
    UTF-8 (e.g. a lone surrogate) raises `UnicodeEncodeError`.
    """
    if isinstance(value, str):
        text = str.__str__(value)
        # every stored value must encode for the buffer copy on removal
        text.encode(ENCODING)
        return text
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode(ENCODING)
    raise TypeError(f"expected str or bytes-like value, got {type(value).__name__}")


def copy_to_buffer(value: str, out: bytearray | memoryview, bufsize: int | None = None) -> int:
    """
    Copy `value` into `out` as NUL-terminated UTF-8.

    At most `bufsize - 1` bytes of content are written, followed by the
    terminator. `bufsize` defaults to `len(out)` and never exceeds it.

    Args:
        value: Text to copy
        out: Writable destination buffer
        bufsize: Capacity of `out` in bytes, terminator included

    Returns:
        Number of content bytes written (terminator excluded)
    """
    capacity = len(out) if bufsize is None else min(bufsize, len(out))
    if capacity <= 0:
        return 0

    data = value.encode(ENCODING)
    n = min(len(data), capacity - 1)
    out[:n] = data[:n]
    out[n : n + 1] = TERMINATOR
    return n


def buffer_to_str(buf: bytes | bytearray | memoryview) -> str:
    """Read a NUL-terminated buffer back into text."""
    data = bytes(buf)
    end = data.find(TERMINATOR)
    if end != -1:
        data = data[:end]
    # truncation may split a multi-byte character
    return data.decode(ENCODING, errors="replace")
