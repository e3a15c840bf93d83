# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Binary content sniffing."""

from __future__ import annotations

import os

SNIFF_BYTES = 8000
CONTROL_RATIO_THRESHOLD = 0.3

# Bytes that legitimately appear in text: tab, LF, VT, FF, CR, ESC.
_TEXT_CONTROL = frozenset({0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x1B})


def is_binary_bytes(head: bytes) -> bool:
    if not head:
        return False
    if b"\x00" in head:
        return True
    control = sum(1 for b in head if b < 0x20 and b not in _TEXT_CONTROL)
    return control / len(head) > CONTROL_RATIO_THRESHOLD


def is_binary_file(path: str | os.PathLike[str]) -> bool:
    """Return ``True`` when the first bytes of *path* look like binary data.

    Raises ``OSError`` if the file cannot be opened.
    """
    with open(path, "rb") as fh:
        head = fh.read(SNIFF_BYTES)
    return is_binary_bytes(head)
