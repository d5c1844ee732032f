"""
Engine configuration.

Everything that used to be a compiled-in constant of a deployment (the
field modulus, the combination ceiling, the prover's fixed coefficient
count and byte width, the number of signature slots) is a field of
:class:`EngineConfig` and is passed explicitly to the components.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any, Dict, Mapping

from .commitment import CommitmentScheme
from .field import BN254_FR, PrimeField
from .roots import RootMapping

DEFAULT_MAX_COMBINATIONS = 1 << 16
DEFAULT_MAX_SIGNERS = 8
DEFAULT_COEFFICIENT_COUNT = 71
DEFAULT_COEFFICIENT_WIDTH = 32


@dataclass(frozen=True)
class EngineConfig:
    """
    Deployment parameters for policy construction.

    Attributes
    ----------
    modulus : int
        Prime of the field all arithmetic runs in (BN254 Fr by default).
    max_combinations : int
        Ceiling on  C(n, k);  generation fails before allocating above it.
    max_signers : int
        Number of signature slots in the prover artifact.
    coefficient_count : int
        Fixed length the coefficient vector is zero-padded to.
    coefficient_width : int
        Bytes per serialised coefficient (big-endian).
    commitment_scheme : CommitmentScheme
        Single strategy used for every published commitment.
    root_mapping : RootMapping
        How a combination sum becomes a polynomial root.
    """

    modulus: int = BN254_FR
    max_combinations: int = DEFAULT_MAX_COMBINATIONS
    max_signers: int = DEFAULT_MAX_SIGNERS
    coefficient_count: int = DEFAULT_COEFFICIENT_COUNT
    coefficient_width: int = DEFAULT_COEFFICIENT_WIDTH
    commitment_scheme: CommitmentScheme = CommitmentScheme.HASH
    root_mapping: RootMapping = RootMapping.IDENTITY

    _field: PrimeField = dc_field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.modulus < 2:
            raise ValueError("modulus must be a prime ≥ 2")
        if self.max_combinations < 1:
            raise ValueError("max_combinations must be ≥ 1")
        if self.max_signers < 1:
            raise ValueError("max_signers must be ≥ 1")
        if self.coefficient_count < 1:
            raise ValueError("coefficient_count must be ≥ 1")
        if self.coefficient_width < 1:
            raise ValueError("coefficient_width must be ≥ 1")
        if (self.modulus - 1).bit_length() > 8 * self.coefficient_width:
            raise ValueError(
                f"coefficient_width={self.coefficient_width} bytes cannot "
                f"hold every element of the field"
            )
        if not isinstance(self.commitment_scheme, CommitmentScheme):
            raise ValueError(f"unknown commitment scheme {self.commitment_scheme!r}")
        if not isinstance(self.root_mapping, RootMapping):
            raise ValueError(f"unknown root mapping {self.root_mapping!r}")
        if self.root_mapping is RootMapping.GRUMPKIN and self.modulus != BN254_FR:
            raise ValueError("grumpkin root mapping requires the BN254 Fr modulus")
        if (self.commitment_scheme is CommitmentScheme.PEDERSEN
                and self.modulus != BN254_FR):
            raise ValueError("pedersen commitments require the BN254 Fr modulus")
        object.__setattr__(self, "_field", PrimeField(self.modulus))

    @property
    def field(self) -> PrimeField:
        return self._field

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EngineConfig:
        """
        Build a config from plain values (e.g. a parsed settings file).

        ``commitment_scheme`` and ``root_mapping`` may be given by name;
        ``modulus`` may be an int or a hex/decimal string.  Unknown keys
        are rejected.
        """
        known = {
            "modulus", "max_combinations", "max_signers",
            "coefficient_count", "coefficient_width",
            "commitment_scheme", "root_mapping",
        }
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")

        kwargs: Dict[str, Any] = dict(data)
        if isinstance(kwargs.get("modulus"), str):
            kwargs["modulus"] = int(kwargs["modulus"], 0)
        if isinstance(kwargs.get("commitment_scheme"), str):
            kwargs["commitment_scheme"] = CommitmentScheme.from_name(
                kwargs["commitment_scheme"])
        if isinstance(kwargs.get("root_mapping"), str):
            kwargs["root_mapping"] = RootMapping.from_name(kwargs["root_mapping"])
        return cls(**kwargs)
