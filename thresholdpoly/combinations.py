"""
k-subset sums over a signer set.

Every size-*k* subset of the *n* signer ids is reduced to the sum of its
members in Z_p.  Only the sums are kept: they become the roots of the
policy polynomial, so the originating subset is never needed again.

Order is lexicographic over index positions: for ids  [a, b, c]  and
k = 2  the output is  [a+b, a+c, b+c].  Downstream consumers index into
the result, so the order is part of the contract.

Cost is  C(n, k)  sums of  k  terms each; the ceiling check runs before
anything proportional to  C(n, k)  is allocated.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Sequence

from .config import DEFAULT_MAX_COMBINATIONS
from .errors import CombinationLimitExceeded, InvalidThreshold
from .field import FieldElement

_logger = logging.getLogger(__name__)


def count_combinations(n: int, k: int) -> int:
    """C(n, k);  0 outside  0 ≤ k ≤ n."""
    if k < 0 or k > n:
        return 0
    return math.comb(n, k)


def _validate(signer_ids: Sequence[FieldElement], k: int, max_combinations: int) -> int:
    n = len(signer_ids)
    if n == 0 or k <= 0 or k > n:
        raise InvalidThreshold(k, n)
    field = signer_ids[0].field
    if any(s.field != field for s in signer_ids):
        raise ValueError("signer ids must belong to the same field")
    count = count_combinations(n, k)
    if count > max_combinations:
        raise CombinationLimitExceeded(count, max_combinations)
    return count


def iter_combination_sums(
    signer_ids: Sequence[FieldElement],
    k: int,
    *,
    max_combinations: int = DEFAULT_MAX_COMBINATIONS,
) -> Iterator[FieldElement]:
    """
    Lazily yield every k-subset sum in lexicographic index order.

    Validation happens eagerly, before the first value is requested.
    """
    _validate(signer_ids, k, max_combinations)
    return _sums(signer_ids, k)


def _sums(signer_ids: Sequence[FieldElement], k: int) -> Iterator[FieldElement]:
    n = len(signer_ids)

    # idx holds the current subset's positions, always strictly increasing
    idx = list(range(k))
    while True:
        total = signer_ids[idx[0]]
        for i in idx[1:]:
            total = total + signer_ids[i]
        yield total

        # advance: rightmost position that can still move right
        i = k - 1
        while i >= 0 and idx[i] == n - k + i:
            i -= 1
        if i < 0:
            return
        idx[i] += 1
        for j in range(i + 1, k):
            idx[j] = idx[j - 1] + 1


def generate_combinations(
    signer_ids: Sequence[FieldElement],
    k: int,
    *,
    max_combinations: int = DEFAULT_MAX_COMBINATIONS,
) -> List[FieldElement]:
    """
    Every size-*k* subset sum of ``signer_ids``.

    Parameters
    ----------
    signer_ids : sequence of FieldElement
        Ordered signer set (all from one field).
    k : int
        Threshold,  1 ≤ k ≤ n.
    max_combinations : int
        Ceiling on  C(n, k).

    Raises
    ------
    InvalidThreshold
        ``k <= 0`` or ``k > n`` (or an empty signer set).
    CombinationLimitExceeded
        ``C(n, k) > max_combinations``.
    """
    count = _validate(signer_ids, k, max_combinations)
    _logger.debug("generating C(%d, %d) = %d combinations", len(signer_ids), k, count)
    if k == 1:
        return list(signer_ids)
    return list(_sums(signer_ids, k))
