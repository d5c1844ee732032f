"""
thresholdpoly: m-of-n threshold policies as finite-field polynomials.

Every admissible subset of signers is reduced to one field element (the
sum of its signer ids); the policy is the monic polynomial vanishing
exactly on those values.  A verifier (typically a zero-knowledge
circuit) checks a subset by evaluating the polynomial at the subset's
value and comparing with zero, while only a short commitment to the
coefficients is published.

Quick start
-----------
::

    from thresholdpoly import EngineConfig, ThresholdPolicy

    config = EngineConfig()                       # BN254 Fr, hash commitment
    ids = [config.field.element(a) for a in (0xA1, 0xB2, 0xC3)]

    policy = ThresholdPolicy.build(ids, threshold=2, config=config)
    assert policy.authorizes([ids[0], ids[2]])
    print(policy.commitment.hex())
"""

__version__ = "0.1.0"

# ── core types ──────────────────────────────────────────────────────────
from .field import PrimeField, FieldElement, BN254_FR, BN254_FQ

# ── errors ──────────────────────────────────────────────────────────────
from .errors import (
    ThresholdPolyError,
    FieldRangeError,
    InvalidThreshold,
    CombinationLimitExceeded,
    EmptyRootSet,
    RootMismatch,
)

# ── engine ──────────────────────────────────────────────────────────────
from .combinations import (
    generate_combinations,
    iter_combination_sums,
    count_combinations,
)
from .polynomial import Polynomial, interpolate, evaluate, self_check, multiply
from .roots import RootMapping, derive_roots
from .commitment import (
    CommitmentScheme,
    Commitment,
    commit,
    verify_commitment,
)

# ── configuration & orchestration ───────────────────────────────────────
from .config import EngineConfig
from .protocol import ThresholdPolicy

# ── prover artifact ─────────────────────────────────────────────────────
from .artifact import (
    ActiveSlot,
    EmptySlot,
    SignatureSlot,
    ProverArtifact,
    build_artifact,
    pad_coefficients,
)

# ── signers ─────────────────────────────────────────────────────────────
from .signers import SignerKey, hash_message, verify_compact

__all__ = [
    # version
    "__version__",
    # core
    "PrimeField", "FieldElement", "BN254_FR", "BN254_FQ",
    # errors
    "ThresholdPolyError", "FieldRangeError", "InvalidThreshold",
    "CombinationLimitExceeded", "EmptyRootSet", "RootMismatch",
    # engine
    "generate_combinations", "iter_combination_sums", "count_combinations",
    "Polynomial", "interpolate", "evaluate", "self_check", "multiply",
    "RootMapping", "derive_roots",
    "CommitmentScheme", "Commitment", "commit", "verify_commitment",
    # config & policy
    "EngineConfig", "ThresholdPolicy",
    # artifact
    "ActiveSlot", "EmptySlot", "SignatureSlot", "ProverArtifact",
    "build_artifact", "pad_coefficients",
    # signers
    "SignerKey", "hash_message", "verify_compact",
]
