"""
Tests for engine configuration.
"""

import pytest

from thresholdpoly.commitment import CommitmentScheme
from thresholdpoly.config import EngineConfig
from thresholdpoly.field import BN254_FR
from thresholdpoly.roots import RootMapping


def test_defaults():
    cfg = EngineConfig()
    assert cfg.modulus == BN254_FR
    assert cfg.field.modulus == BN254_FR
    assert cfg.max_signers == 8
    assert cfg.coefficient_count == 71
    assert cfg.coefficient_width == 32
    assert cfg.commitment_scheme is CommitmentScheme.HASH
    assert cfg.root_mapping is RootMapping.IDENTITY


def test_small_field_config():
    cfg = EngineConfig(modulus=97, coefficient_width=1, coefficient_count=8)
    assert cfg.field.modulus == 97


@pytest.mark.parametrize("kwargs", [
    {"modulus": 1},
    {"max_combinations": 0},
    {"max_signers": 0},
    {"coefficient_count": 0},
    {"coefficient_width": 0},
    {"coefficient_width": 16},
    {"modulus": 97, "root_mapping": RootMapping.GRUMPKIN, "coefficient_width": 1},
    {"modulus": 97, "commitment_scheme": CommitmentScheme.PEDERSEN},
    {"commitment_scheme": "hash"},
])
def test_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


def test_from_mapping():
    cfg = EngineConfig.from_mapping({
        "modulus": "0x61",
        "coefficient_width": 1,
        "max_signers": 4,
        "commitment_scheme": "hash",
        "root_mapping": "identity",
    })
    assert cfg.modulus == 97
    assert cfg.max_signers == 4
    assert cfg.commitment_scheme is CommitmentScheme.HASH

    cfg = EngineConfig.from_mapping({"commitment_scheme": "pedersen",
                                     "root_mapping": "grumpkin"})
    assert cfg.commitment_scheme is CommitmentScheme.PEDERSEN
    assert cfg.root_mapping is RootMapping.GRUMPKIN


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError):
        EngineConfig.from_mapping({"modulos": 97})


def test_frozen_and_comparable():
    a = EngineConfig(max_signers=4)
    b = EngineConfig(max_signers=4)
    assert a == b
    with pytest.raises(AttributeError):
        a.max_signers = 5
