"""
Exception types raised by the threshold-polynomial engine.

None of these are transient.  Input errors (``InvalidThreshold``,
``CombinationLimitExceeded``, ``EmptyRootSet``) are reported to the
caller as-is; ``FieldRangeError`` and ``RootMismatch`` signal a bug and
must stop artifact generation.
"""

from __future__ import annotations


class ThresholdPolyError(Exception):
    """Base class for every error raised by :mod:`thresholdpoly`."""


class FieldRangeError(ThresholdPolyError, ValueError):
    """A value outside ``[0, P)`` was given where a reduced element is required."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(f"value {value} is outside [0, P) for P={modulus}")
        self.value = value
        self.modulus = modulus


class InvalidThreshold(ThresholdPolyError, ValueError):
    """Threshold *k* is not in ``1..n`` for a signer set of size *n*."""

    def __init__(self, k: int, n: int) -> None:
        super().__init__(f"threshold {k} must satisfy 1 <= k <= {n}")
        self.k = k
        self.n = n


class CombinationLimitExceeded(ThresholdPolyError, ValueError):
    """``C(n, k)`` is above the configured ceiling."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"too many combinations: C(n, k) = {count} exceeds limit {limit}"
        )
        self.count = count
        self.limit = limit


class EmptyRootSet(ThresholdPolyError, ValueError):
    """No roots were given and the field could not be inferred."""


class RootMismatch(ThresholdPolyError, RuntimeError):
    """An interpolated polynomial does not vanish at one of its roots."""

    def __init__(self, index: int, root: int, value: int) -> None:
        super().__init__(
            f"polynomial does not vanish at root #{index} ({root:#x}): "
            f"f(x) = {value:#x}"
        )
        self.index = index
        self.root = root
        self.value = value
