#
# Run with:
#
#     python3 -m examples.accumulator_example
#

import lz_fnv


def example():
    hasher = lz_fnv.Fnv1a.with_default_basis(64)
    for chunk in [b"whale", b"tiger", b"bear"]:
        hasher.absorb(chunk)
    print(f"fnv1a_64: 0x{hasher.digest():016x}")

    # FNV-0 has no default starting value, and hashing this string with a zero
    # seed is how the FNV-1 offset bases were derived
    fnv0 = lz_fnv.Fnv0.with_seed(32, 0)
    fnv0.absorb(b"chongo <Landon Curt Noll> /\\../\\")
    print(f"fnv0_32:  0x{fnv0.digest():08x}")


if __name__ == "__main__":
    example()
