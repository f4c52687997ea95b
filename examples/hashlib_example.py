#
# Run with:
#
#     python3 -m examples.hashlib_example
#

import lz_fnv


def bucket_for(key: str, num_buckets: int) -> int:
    h = lz_fnv.new("fnv1a_32", key.encode("utf-8"))
    return h.intdigest() % num_buckets


def example():
    h = lz_fnv.new("fnv1_128")
    h.update(b"foo")
    h.update(b"bar")
    print(h.name, h.hexdigest())

    for key in ["whale", "tiger", "bear"]:
        print(key, bucket_for(key, 16))


if __name__ == "__main__":
    example()
