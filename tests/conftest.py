"""
Shared fixtures.
"""

import pytest

from thresholdpoly.config import EngineConfig
from thresholdpoly.field import BN254_FR, PrimeField

# well-known local development accounts (anvil / hardhat), in account order
DEV_PRIVATE_KEYS = [
    "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80",
    "0x59c6995e998f97a5a0044966f0945389dc9e86dae88c7a8412f4603b6b78690d",
    "0x5de4111afa1a4b94908f83103eb1f1706367c2e68ca870fc3fb9a804cdab365a",
    "0x7c852118294e51e653712a81e05800f419141751be58f605c371e15141b007a6",
    "0x47e179ec197488593b187f80a00eb0da91f1b9d0b13f8733639f19c30a34926a",
    "0x8b3a350cf5c34c9194ca85829a2df0ec3153be0318b5e2d3348e872092edffba",
    "0x92db14e403b83dfe3df233f83dfa3a0d7096f21ca9b0d6d6b8d88b2b4ec1564e",
    "0x4bbbf85ce3377467afe5d46f804f221813b2bb87f24d81f60f1fcdbf7cbf4356",
]

DEV_ADDRESSES = [
    0xF39FD6E51AAD88F6F4CE6AB8827279CFFFB92266,
    0x70997970C51812DC3A010C7D01B50E0D17DC79C8,
    0x3C44CDDDB6A900FA2B585DD299E03D12FA4293BC,
    0x90F79BF6EB2C4F870365E785982E1F101E93B906,
    0x15D34AAF54267DB7D7C367839AAF71A00A2C6A65,
    0x9965507D1A55BCC2695C58BA16FB37D819B0A4DC,
    0x976EA74026E726554DB657FA54763ABD0C3A0AA9,
    0x14DC79964DA2C08B23698B3D3CC7CA32193D9955,
]


@pytest.fixture
def f97():
    """Small prime field for hand-checkable arithmetic."""
    return PrimeField(97)


@pytest.fixture
def fr():
    return PrimeField(BN254_FR)


@pytest.fixture
def bn254_config():
    return EngineConfig()


@pytest.fixture
def dev_ids(fr):
    return [fr.element(a) for a in DEV_ADDRESSES]
