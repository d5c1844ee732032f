"""
High-level policy construction.

Provides a single ``ThresholdPolicy`` class that ties together
combination generation, root mapping, interpolation, self-verification
and commitment into one call, and answers membership queries.

Usage
-----
::

    from thresholdpoly import EngineConfig, ThresholdPolicy

    config = EngineConfig()
    ids = [config.field.element(a) for a in addresses]

    policy = ThresholdPolicy.build(ids, threshold=2, config=config)
    assert policy.authorizes(ids[:2])

    artifact = policy.to_artifact(message_hash, slots)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .artifact import ActiveSlot, ProverArtifact, build_artifact, pad_coefficients
from .combinations import generate_combinations
from .commitment import Commitment, commit, verify_commitment
from .config import EngineConfig
from .errors import InvalidThreshold
from .field import FieldElement
from .polynomial import Polynomial, evaluate, interpolate, self_check
from .roots import derive_roots

_logger = logging.getLogger(__name__)


def _padded(poly: Polynomial, count: int) -> Polynomial:
    # never trims; an over-long polynomial is rejected later by build_artifact
    return Polynomial.from_values(
        poly.field, pad_coefficients(poly.values(), max(count, len(poly))))


@dataclass(frozen=True)
class ThresholdPolicy:
    """
    A published "any *k* of these *n*" policy.

    Attributes
    ----------
    signer_ids : tuple[FieldElement]
        The signer set, in the order combinations were enumerated.
    threshold : int
        Required number of signers *k*.
    combinations : tuple[FieldElement]
        All  C(n, k)  subset sums, lexicographic by index.
    roots : tuple[FieldElement]
        ``combinations`` after the configured root mapping.
    polynomial : Polynomial
        Monic polynomial vanishing exactly on ``roots``.
    commitment : Commitment
        Binding commitment to ``polynomial``'s coefficients zero-padded
        to ``config.coefficient_count``, the vector an artifact ships.
    """

    config: EngineConfig
    signer_ids: Tuple[FieldElement, ...]
    threshold: int
    combinations: Tuple[FieldElement, ...]
    roots: Tuple[FieldElement, ...]
    polynomial: Polynomial
    commitment: Commitment

    @classmethod
    def build(
        cls,
        signer_ids: Sequence[FieldElement],
        threshold: int,
        config: Optional[EngineConfig] = None,
    ) -> ThresholdPolicy:
        """
        Construct, self-check and commit to the policy polynomial.

        Raises
        ------
        InvalidThreshold, CombinationLimitExceeded
            Bad  (n, k);  nothing is computed.
        RootMismatch
            The polynomial failed to vanish at one of its roots; no
            policy is returned.
        """
        config = config if config is not None else EngineConfig()
        field = config.field
        if any(s.field != field for s in signer_ids):
            raise ValueError("signer ids must belong to the configured field")
        if len(set(signer_ids)) != len(signer_ids):
            raise ValueError("signer ids must be distinct")

        combos = generate_combinations(
            signer_ids, threshold, max_combinations=config.max_combinations)
        roots = derive_roots(combos, config.root_mapping)
        poly = interpolate(roots, field)
        self_check(poly, roots)
        cm = commit(
            _padded(poly, config.coefficient_count),
            config.commitment_scheme,
            width=config.coefficient_width,
        )

        _logger.debug(
            "built %d-of-%d policy: %d roots, commitment %s",
            threshold, len(signer_ids), len(roots), cm.hex(config.coefficient_width),
        )
        return cls(
            config=config,
            signer_ids=tuple(signer_ids),
            threshold=threshold,
            combinations=tuple(combos),
            roots=tuple(roots),
            polynomial=poly,
            commitment=cm,
        )

    # ── queries ────────────────────────────────────────────────────────

    def root_for(self, subset: Sequence[FieldElement]) -> FieldElement:
        """The value a verifier evaluates at for *subset*."""
        if not subset:
            raise InvalidThreshold(0, len(self.signer_ids))
        total = sum(subset[1:], subset[0])
        return derive_roots([total], self.config.root_mapping)[0]

    def authorizes(self, subset: Sequence[FieldElement]) -> bool:
        """
        True iff *subset* is  ``threshold``  distinct members of the
        signer set and the polynomial vanishes at its root.
        """
        members = set(self.signer_ids)
        if len(subset) != self.threshold or len(set(subset)) != len(subset):
            return False
        if not all(s in members for s in subset):
            return False
        return evaluate(self.polynomial, self.root_for(subset)).is_zero()

    def verify(self) -> bool:
        """Re-run self-check and commitment recomputation."""
        self_check(self.polynomial, self.roots)
        return verify_commitment(
            _padded(self.polynomial, self.config.coefficient_count),
            self.commitment,
            width=self.config.coefficient_width,
        )

    # ── export ─────────────────────────────────────────────────────────

    def padded_coefficients(self) -> List[int]:
        return pad_coefficients(self.polynomial.values(), self.config.coefficient_count)

    def to_artifact(
        self,
        message_hash: bytes,
        slots: Sequence[ActiveSlot],
    ) -> ProverArtifact:
        """Prover input for one message, signed by *slots*."""
        if len(slots) < self.threshold:
            raise ValueError(
                f"need at least {self.threshold} signatures, got {len(slots)}")
        return build_artifact(
            self.polynomial.values(),
            self.commitment,
            message_hash,
            slots,
            coefficient_count=self.config.coefficient_count,
            coefficient_width=self.config.coefficient_width,
            max_signers=self.config.max_signers,
        )
