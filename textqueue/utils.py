def bytes_to_str(b: bytes) -> str:
    try:
        return b.decode("utf-8")
    except UnicodeDecodeError:
        return b.hex()


def to_owned_bytes(text: bytes | bytearray | memoryview | str) -> bytes:
    """
    Return an independent ``bytes`` copy of a text value.

    Strings are encoded as UTF-8. Mutable buffers are copied so the caller
    can keep changing its own storage afterwards.

    Args:
        text: Value to copy

    Returns:
        Immutable copy of the value

    Raises:
        TypeError: If the value is not text
        ValueError: If the value contains a NUL byte
    """
    if isinstance(text, str):
        value = text.encode("utf-8")
    elif isinstance(text, (bytes, bytearray, memoryview)):
        value = bytes(text)
    else:
        raise TypeError(f"text value must be bytes-like or str, not {type(text).__name__}")

    if b"\0" in value:
        raise ValueError("embedded null byte")
    return value


def copy_bounded(value: bytes, out: bytearray | memoryview, capacity: int | None) -> int:
    """
    Copy a prefix of ``value`` into a caller's buffer.

    At most ``capacity - 1`` bytes are copied. A ``bytearray`` is resized to
    hold exactly the copied prefix. Any other writable buffer keeps its
    length: the prefix is also limited by that length, and a NUL byte follows
    it when there is room.

    Args:
        value: Bytes to copy
        out: Destination buffer
        capacity: Room in ``out`` including the terminator, None for unbounded

    Returns:
        Number of value bytes copied

    Raises:
        TypeError: If ``out`` is not a writable buffer
    """
    if isinstance(out, bytearray):
        fragment = value if capacity is None else value[: max(capacity - 1, 0)]
        out[:] = fragment
        return len(fragment)

    view = memoryview(out).cast("B")
    if view.readonly:
        raise TypeError(f"output buffer of type {type(out).__name__} is read-only")

    limit = len(view) if capacity is None else min(capacity, len(view))
    fragment = value[: max(limit - 1, 0)]
    view[: len(fragment)] = fragment
    if len(fragment) < len(view):
        view[len(fragment)] = 0
    return len(fragment)


def format_queue(queue) -> str:
    """Render a queue as ``[a b c] size=3`` for display."""
    values = " ".join(bytes_to_str(v) for v in queue)
    return f"[{values}] size={len(queue)}"
