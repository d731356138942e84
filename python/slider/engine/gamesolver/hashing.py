"""Fixed-width state keys for duplicate detection."""

from __future__ import annotations

import hashlib

from slider.models.board import Board

KEY_BYTES = 8


def state_key(board: Board) -> int:
    """64-bit BLAKE2b digest of the cell contents.

    Identical grids always map to the same key.  Distinct grids collide with
    probability around 2**-64 per pair, which the search accepts.
    """
    digest = hashlib.blake2b(bytes(board.cells), digest_size=KEY_BYTES).digest()
    return int.from_bytes(digest, "big")
