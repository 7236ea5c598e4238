"""
Hex Formatting Utilities

Fixed-length hex strings for tokens and a canonical hex dump for
opaque payloads (same layout as `hexdump -C`).
"""

from typing import List, Optional


BYTES_PER_LINE = 16


def format_hex(data: bytes, length: Optional[int] = None) -> str:
    """
    Format bytes as a contiguous lowercase hex string.

    With length set, data is truncated or zero-padded to exactly that many
    bytes first.
    """
    data = bytes(data)
    if length is not None:
        data = data[:length].ljust(length, b"\x00")
    return data.hex()


def _is_printable(b: int) -> bool:
    return 0x20 <= b <= 0x7e


def _format_line(offset: int, chunk: bytes) -> str:
    hex_bytes = [f"{b:02x}" for b in chunk]
    left = " ".join(hex_bytes[:8])
    right = " ".join(hex_bytes[8:])
    ascii_part = "".join(chr(b) if _is_printable(b) else "." for b in chunk)
    return f"{offset:08x}  {left:<23}  {right:<23}  |{ascii_part}|"


def hexdump_lines(data: bytes) -> List[str]:
    """
    Render data as hex dump lines.

    Runs of identical full lines are collapsed into a single "*" line and
    the dump ends with the total length as an offset line.

    Args:
        data: Bytes to dump

    Returns:
        list: Lines without trailing newlines (empty for empty input)
    """
    data = bytes(data)
    if not data:
        return []

    lines = []
    previous = None
    repeated = False

    for offset in range(0, len(data), BYTES_PER_LINE):
        chunk = data[offset:offset + BYTES_PER_LINE]
        if chunk == previous and len(chunk) == BYTES_PER_LINE:
            if not repeated:
                lines.append("*")
                repeated = True
            continue

        repeated = False
        previous = chunk
        lines.append(_format_line(offset, chunk))

    lines.append(f"{len(data):08x}")
    return lines
