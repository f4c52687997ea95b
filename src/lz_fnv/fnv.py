"""
FNV is the Fowler–Noll–Vo hash function, a simple multiply-and-XOR hash that's
very fast, has good dispersion for hash table keys and checksums, and provides
no cryptographic security whatsoever.

Three variants are implemented:

    * FNV-0, the historical version that starts from zero. It's only really
      useful for deriving the offset bases of the other two variants, so it
      must always be given an explicit seed.

    * FNV-1, which multiplies by the FNV prime and then XORs in each byte.

    * FNV-1a, which XORs in each byte and then multiplies. It disperses bits
      slightly better than FNV-1 and is usually the one you want.

Each is available at 32, 64, and 128 bits. Python integers don't overflow, so
every multiplication is masked down to the hash's width, which gives the
wraparound the algorithm is defined in terms of.
"""

from collections.abc import Buffer
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Literal, Optional, Type, TypeVar

Width = Literal[32] | Literal[64] | Literal[128]


@dataclass(frozen=True)
class WidthParams:
    """
    FNV constants for a single hash width. Primes and offset bases are not
    interchangeable between widths.
    """

    bits: int
    prime: int
    offset_basis: int

    @property
    def mask(self) -> int:
        """
        Mask of 1s `bits` long like 0xffffffff, used to take the lower N bits of
        a multiplication product.
        """

        return 2**self.bits - 1

    @property
    def digest_size(self) -> int:
        return self.bits // 8


FNV_PARAMS: Dict[Width, WidthParams] = {
    32: WidthParams(
        bits=32,
        prime=0x01000193,
        offset_basis=0x811C9DC5,
    ),
    64: WidthParams(
        bits=64,
        prime=0x00000100000001B3,
        offset_basis=0xCBF29CE484222325,
    ),
    128: WidthParams(
        bits=128,
        prime=0x0000000001000000000000000000013B,
        offset_basis=0x6C62272E07BB014262B821756295C58D,
    ),
}
"""
Published FNV primes and offset bases by hash width.
"""

SUPPORTED_WIDTHS: tuple[Width, ...] = tuple(FNV_PARAMS.keys())
"""
Hash widths in bits that can be passed to any of the accumulators.
"""

WIDTH_DEFAULT: Width = 64
"""
Width used when constructing an FNV-1 or FNV-1a accumulator without one.
"""


class Variant(str, Enum):
    """
    The FNV variant an accumulator implements. Variants differ only in their
    starting value and in the order of the two operations applied per byte.
    """

    FNV0 = "fnv0"
    """
    Multiply then XOR, starting from a caller-provided seed (traditionally
    zero).
    """

    FNV1 = "fnv1"
    """
    Multiply then XOR, starting from the width's offset basis.
    """

    FNV1A = "fnv1a"
    """
    XOR then multiply, starting from the width's offset basis.
    """

    @property
    def xor_first(self) -> bool:
        return self is Variant.FNV1A


AccumulatorT = TypeVar("AccumulatorT", bound="FnvAccumulator")
OffsetBasisAccumulatorT = TypeVar(
    "OffsetBasisAccumulatorT", bound="_OffsetBasisAccumulator"
)


class FnvAccumulator:
    """
    Holds the in-progress state of an FNV hash. Bytes are absorbed with
    `absorb()` (or `write()`) any number of times, and the hash of everything
    absorbed so far is read back with `digest()` (or `finish()`).

    Absorbing a sequence of chunks always produces the same hash as absorbing
    their concatenation in one call.

    This is a base class. Use `Fnv0`, `Fnv1`, or `Fnv1a`.
    """

    variant: Variant

    def __init__(self, width: Width, seed: int):
        if getattr(self, "variant", None) is None:
            raise TypeError(
                f"{type(self).__name__} has no FNV variant; use Fnv0, Fnv1, or Fnv1a"
            )

        self._params = _params_for(width)
        self._value = _validate_seed(seed, self._params)

    @classmethod
    def with_seed(cls: Type[AccumulatorT], width: Width, seed: int) -> AccumulatorT:
        """
        Creates an accumulator of the given width starting from an explicit
        seed. Any value that fits in `width` bits is allowed, including the
        standard offset bases.

            ```
            hasher = lz_fnv.Fnv1a.with_seed(32, 0x1234)
            ```
        """

        return cls(width, seed)

    @property
    def width(self) -> Width:
        return self._params.bits  # type: ignore[return-value]

    def absorb(self, data: Buffer) -> None:
        """
        Absorbs bytes into the hash. Data should be bytes rather than a string,
        so encode a string with something like `input_str.encode("utf-8")` or
        `b"string as bytes"`.
        """

        hash = self._value
        mask = self._params.mask
        prime = self._params.prime

        if self.variant.xor_first:
            for byte in _byte_values(data):
                hash ^= byte
                hash *= prime
                hash &= mask  # take lower N bits of multiplication product
        else:
            for byte in _byte_values(data):
                hash *= prime
                hash &= mask  # take lower N bits of multiplication product
                hash ^= byte

        self._value = hash

    def digest(self) -> int:
        """
        Returns the hash of all bytes absorbed so far. Doesn't modify state, so
        it's fine to call this mid-stream and keep absorbing afterwards.
        """

        return self._value

    # Same operations under the names of the generic hasher protocol.
    write = absorb
    finish = digest

    def copy(self: AccumulatorT) -> AccumulatorT:
        """
        Returns an independent accumulator with the same variant, width, and
        current state.
        """

        return type(self).with_seed(self.width, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FnvAccumulator):
            return NotImplemented

        return (
            self.variant == other.variant
            and self.width == other.width
            and self._value == other._value
        )

    def __repr__(self) -> str:
        hex_width = self._params.digest_size * 2
        return f"{type(self).__name__}(width={self.width}, value=0x{self._value:0{hex_width}x})"


class Fnv0(FnvAccumulator):
    """
    The FNV-0 hash.

    This is deprecated except for computing the FNV offset basis for FNV-1 and
    FNV-1a hashes, so it has no default starting value and must be constructed
    with a seed:

        ```
        hasher = lz_fnv.Fnv0.with_seed(32, 0)
        hasher.absorb(b"chongo <Landon Curt Noll> /\\../\\")
        hasher.digest() # 0x811c9dc5, the FNV-1 32-bit offset basis
        ```
    """

    variant = Variant.FNV0


class _OffsetBasisAccumulator(FnvAccumulator):
    """
    Accumulator for a variant that has a standard offset basis, which is used
    when no seed is given.
    """

    def __init__(self, width: Width = WIDTH_DEFAULT, seed: Optional[int] = None):
        if seed is None:
            seed = _params_for(width).offset_basis

        super().__init__(width, seed)

    # Defined here rather than on the base class because FNV-0 has no standard
    # starting value.
    @classmethod
    def with_default_basis(
        cls: Type[OffsetBasisAccumulatorT], width: Width = WIDTH_DEFAULT
    ) -> OffsetBasisAccumulatorT:
        """
        Creates an accumulator of the given width starting from the standard
        FNV offset basis.
        """

        return cls(width)


class Fnv1(_OffsetBasisAccumulator):
    """
    The FNV-1 hash.

        ```
        hasher = lz_fnv.Fnv1(64)
        hasher.absorb(b"foobar")
        hasher.digest() # 0x340d8765a4dda9c2
        ```
    """

    variant = Variant.FNV1


class Fnv1a(_OffsetBasisAccumulator):
    """
    The FNV-1a hash.

        ```
        hasher = lz_fnv.Fnv1a(64)
        hasher.absorb(b"foobar")
        hasher.digest() # 0x85944171f73967e8
        ```
    """

    variant = Variant.FNV1A


ACCUMULATOR_CLASSES: Dict[Variant, Type[FnvAccumulator]] = {
    Variant.FNV0: Fnv0,
    Variant.FNV1: Fnv1,
    Variant.FNV1A: Fnv1a,
}
"""
Maps each variant to the accumulator class implementing it.
"""


def fnv0_hash(data: bytes, size: Width, seed: int = 0) -> int:
    """
    Hashes data as an FNV-0 hash of the given size starting from `seed` and
    returns the result.
    """

    hasher = Fnv0.with_seed(size, seed)
    hasher.absorb(data)
    return hasher.digest()


def fnv1_hash(data: bytes, size: Width) -> int:
    """
    Hashes data as a 32, 64, or 128-bit FNV-1 hash and returns the result. Data
    should be bytes rather than a string, so encode a string with something like
    `input_str.encode("utf-8")` or `b"string as bytes"`.
    """

    hasher = Fnv1.with_default_basis(size)
    hasher.absorb(data)
    return hasher.digest()


def fnv1a_hash(data: bytes, size: Width) -> int:
    """
    Hashes data as a 32, 64, or 128-bit FNV-1a hash and returns the result.
    """

    hasher = Fnv1a.with_default_basis(size)
    hasher.absorb(data)
    return hasher.digest()


def _params_for(width: Width) -> WidthParams:
    try:
        return FNV_PARAMS[width]
    except KeyError:
        supported = ", ".join(str(w) for w in SUPPORTED_WIDTHS)
        raise ValueError(
            f"unsupported FNV width {width!r}, should be one of: {supported}"
        ) from None


def _validate_seed(seed: int, params: WidthParams) -> int:
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError(f"seed should be an int, got {type(seed).__name__}")

    if not 0 <= seed <= params.mask:
        raise ValueError(
            f"seed {seed:#x} doesn't fit in an unsigned {params.bits}-bit integer"
        )

    return seed


def _byte_values(data: Buffer) -> Iterable[int]:
    if isinstance(data, (bytes, bytearray)):
        return data

    # str is iterable, but its characters aren't bytes
    if isinstance(data, str):
        raise TypeError(
            'data should be bytes rather than a string; encode it with something like `input_str.encode("utf-8")`'
        )

    # view any other buffer (array.array, multi-byte memoryview) as raw bytes
    view = memoryview(data)
    if not view.c_contiguous:
        return view.tobytes()

    return view.cast("B")
