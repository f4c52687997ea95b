# Reexport for more ergonomic use in calling code.
from .fnv import (
    FNV_PARAMS as FNV_PARAMS,
    SUPPORTED_WIDTHS as SUPPORTED_WIDTHS,
    WIDTH_DEFAULT as WIDTH_DEFAULT,
    FnvAccumulator as FnvAccumulator,
    Fnv0 as Fnv0,
    Fnv1 as Fnv1,
    Fnv1a as Fnv1a,
    Variant as Variant,
    Width as Width,
    WidthParams as WidthParams,
    fnv0_hash as fnv0_hash,
    fnv1_hash as fnv1_hash,
    fnv1a_hash as fnv1a_hash,
)
from .hasher_protocol import (
    FnvHasherProtocol as FnvHasherProtocol,
)
from .hashlib_adapter import (
    FnvHash as FnvHash,
    algorithms_available as algorithms_available,
    new as new,
)
