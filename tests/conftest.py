from collections.abc import Callable

import base58
import pytest
from eth_account import Account
from eth_account.messages import encode_defunct
from fastapi.testclient import TestClient
from nacl.signing import SigningKey

from siwx_cacao.main import app

ETHEREUM_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"

Signer = Callable[[str], str]


@pytest.fixture
def ethereum_address() -> str:
    return Account.from_key(ETHEREUM_PRIVATE_KEY).address


@pytest.fixture
def sign_ethereum() -> Signer:
    account = Account.from_key(ETHEREUM_PRIVATE_KEY)

    def sign(text: str) -> str:
        signed = account.sign_message(encode_defunct(text=text))
        return "0x" + bytes(signed.signature).hex()

    return sign


@pytest.fixture
def solana_key() -> SigningKey:
    return SigningKey(bytes(range(32)))


@pytest.fixture
def solana_address(solana_key: SigningKey) -> str:
    return base58.b58encode(bytes(solana_key.verify_key)).decode("ascii")


@pytest.fixture
def sign_solana(solana_key: SigningKey) -> Signer:
    def sign(text: str) -> str:
        return base58.b58encode(solana_key.sign(text.encode("utf-8")).signature).decode("ascii")

    return sign


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
