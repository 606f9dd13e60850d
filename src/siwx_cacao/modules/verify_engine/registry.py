from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from siwx_cacao.core.ed25519_verify import verify_solana_signature
from siwx_cacao.core.eip191_verify import verify_eip191_signature
from siwx_cacao.siwx.ethereum import EthereumFormatter
from siwx_cacao.siwx.solana import SolanaFormatter

EIP191 = EthereumFormatter.signature_type
SOLANA_ED25519 = SolanaFormatter.signature_type


@runtime_checkable
class SignatureVerifier(Protocol):
    """Checks one signature scheme. Must return False, not raise, on malformed input."""

    def verify(self, address: str, message: str, signature: str) -> bool: ...


class Eip191Verifier:
    def verify(self, address: str, message: str, signature: str) -> bool:
        return verify_eip191_signature(address=address, message=message, signature=signature)


class SolanaEd25519Verifier:
    def verify(self, address: str, message: str, signature: str) -> bool:
        return verify_solana_signature(address=address, message=message, signature=signature)


class SignatureVerifierRegistry:
    """Scheme tag -> signature verifier."""

    def __init__(self, verifiers: Mapping[str, SignatureVerifier] | None = None) -> None:
        self._verifiers: dict[str, SignatureVerifier] = {}
        for scheme, verifier in (verifiers or {}).items():
            self.register(scheme, verifier)

    def register(self, scheme: str, verifier: SignatureVerifier, *, replace: bool = False) -> None:
        if scheme in self._verifiers and not replace:
            raise ValueError(f"Signature scheme already registered: {scheme}")
        self._verifiers[scheme] = verifier

    def get(self, scheme: str) -> SignatureVerifier | None:
        return self._verifiers.get(scheme)

    def __contains__(self, scheme: object) -> bool:
        return scheme in self._verifiers


default_verifiers = SignatureVerifierRegistry(
    {
        EIP191: Eip191Verifier(),
        SOLANA_ED25519: SolanaEd25519Verifier(),
    }
)
