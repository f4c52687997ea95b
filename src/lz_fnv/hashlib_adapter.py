"""
Adapts FNV accumulators to the object interface of `hashlib` so they can be
dropped into code written against `hashlib.sha256()` and friends:

    ```
    h = lz_fnv.new("fnv1a_64")
    h.update(b"foo")
    h.update(b"bar")
    h.hexdigest() # "85944171f73967e8"
    ```
"""

from collections.abc import Buffer
from typing import Dict, Optional, Tuple

from .fnv import (
    ACCUMULATOR_CLASSES,
    SUPPORTED_WIDTHS,
    FnvAccumulator,
    Variant,
    Width,
)

_ALGORITHMS: Dict[str, Tuple[Variant, Width]] = {
    f"{variant.value}_{width}": (variant, width)
    for variant in Variant
    for width in SUPPORTED_WIDTHS
}

algorithms_available: frozenset[str] = frozenset(_ALGORITHMS)
"""
Names accepted by `new()`, like `fnv1a_64` or `fnv0_32`.
"""


class FnvHash:
    """
    A `hashlib`-style hash object wrapping an FNV accumulator. Unlike `hashlib`,
    `digest()` returns bytes while `intdigest()` returns the integer hash, which
    is what you want for something like a bucket index.
    """

    block_size = 1
    """
    FNV consumes input a byte at a time.
    """

    def __init__(self, accumulator: FnvAccumulator):
        self._accumulator = accumulator

    @property
    def name(self) -> str:
        return f"{self._accumulator.variant.value}_{self._accumulator.width}"

    @property
    def digest_size(self) -> int:
        return self._accumulator.width // 8

    def update(self, data: Buffer) -> None:
        self._accumulator.absorb(data)

    def digest(self) -> bytes:
        """
        Returns the hash as big-endian bytes, `digest_size` long.
        """

        return self.intdigest().to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self._accumulator.digest()

    def copy(self) -> "FnvHash":
        return FnvHash(self._accumulator.copy())

    def __repr__(self) -> str:
        return f"<{self.name} FnvHash object @ 0x{id(self):x}>"


def new(name: str, data: Buffer = b"", seed: Optional[int] = None) -> FnvHash:
    """
    Creates a new hash object for the named algorithm, optionally absorbing
    `data` right away. FNV-1 and FNV-1a start from their standard offset basis
    unless `seed` is given, but `fnv0_*` algorithms have no standard starting
    value and require one.
    """

    if not isinstance(name, str):
        raise TypeError(f"name should be a str, got {type(name).__name__}")

    try:
        variant, width = _ALGORITHMS[name.lower()]
    except KeyError:
        raise ValueError(
            f"unsupported FNV algorithm {name!r}, should be one of: {', '.join(sorted(algorithms_available))}"
        ) from None

    accumulator_class = ACCUMULATOR_CLASSES[variant]
    if seed is None:
        if variant == Variant.FNV0:
            raise ValueError(f"{name} has no default offset basis; a seed is required")

        accumulator = accumulator_class.with_default_basis(width)  # type: ignore[attr-defined]
    else:
        accumulator = accumulator_class.with_seed(width, seed)

    hash_obj = FnvHash(accumulator)
    if data:
        hash_obj.update(data)

    return hash_obj
