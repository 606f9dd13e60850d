from siwx_cacao.modules.verify_engine.registry import (
    EIP191,
    SOLANA_ED25519,
    Eip191Verifier,
    SignatureVerifier,
    SignatureVerifierRegistry,
    SolanaEd25519Verifier,
    default_verifiers,
)
from siwx_cacao.modules.verify_engine.schema import VerificationResult, VerifyOptions
from siwx_cacao.modules.verify_engine.service import VerificationEngine, default_engine, verify

__all__ = [
    "EIP191",
    "SOLANA_ED25519",
    "Eip191Verifier",
    "SolanaEd25519Verifier",
    "SignatureVerifier",
    "SignatureVerifierRegistry",
    "default_verifiers",
    "VerificationEngine",
    "VerificationResult",
    "VerifyOptions",
    "default_engine",
    "verify",
]
