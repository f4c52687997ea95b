from collections.abc import Buffer
from typing import Protocol, runtime_checkable


@runtime_checkable
class FnvHasherProtocol(Protocol):
    """
    Protocol for a streaming hasher that's fed bytes incrementally and
    finalized to a fixed-width integer. All FNV accumulators implement it, so
    code that doesn't care which variant or width it's been handed (say, a hash
    table picking buckets) can be typed against this instead.
    """

    def write(self, data: Buffer) -> None:
        """
        Writes some data into the hasher.
        """

        pass

    def finish(self) -> int:
        """
        Produces the hash of all data written so far. Doesn't reset the hasher.
        """

        pass
