#
# Run with:
#
#     python3 -m examples.all
#

from examples import accumulator_example
from examples import hashlib_example

if __name__ == "__main__":
    accumulator_example.example()
    hashlib_example.example()
