from siwx_cacao.caip import AccountId
from siwx_cacao.client import AsyncCacaoVerifierClient, CacaoVerifierClient
from siwx_cacao.errors import (
    CacaoError,
    Expired,
    InvalidSignature,
    MalformedMessageError,
    MalformedPayload,
    MissingSignature,
    NotYetValid,
    UnsupportedIssuerFormat,
    UnsupportedIssuerFormatError,
    UnsupportedScheme,
    VerificationError,
)
from siwx_cacao.factory import CapabilityFactory, from_chain_message, to_chain_message
from siwx_cacao.models import Capability, Header, Payload, Signature
from siwx_cacao.modules.block_codec import CacaoBlock, DagCborEncoder, decode_block, encode_block
from siwx_cacao.modules.verify_engine import (
    SignatureVerifierRegistry,
    VerificationEngine,
    VerificationResult,
    VerifyOptions,
    verify,
)
from siwx_cacao.siwx import (
    EthereumFormatter,
    MessageFormatterRegistry,
    SiweMessage,
    SiwsMessage,
    SiwxFormatter,
    SiwxMessage,
    SolanaFormatter,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "AccountId",
    "Capability",
    "Header",
    "Payload",
    "Signature",
    "CapabilityFactory",
    "from_chain_message",
    "to_chain_message",
    "SiwxFormatter",
    "SiwxMessage",
    "EthereumFormatter",
    "SiweMessage",
    "SolanaFormatter",
    "SiwsMessage",
    "MessageFormatterRegistry",
    "VerificationEngine",
    "VerificationResult",
    "VerifyOptions",
    "SignatureVerifierRegistry",
    "verify",
    "CacaoBlock",
    "DagCborEncoder",
    "encode_block",
    "decode_block",
    "CacaoVerifierClient",
    "AsyncCacaoVerifierClient",
    "CacaoError",
    "MalformedMessageError",
    "UnsupportedIssuerFormatError",
    "VerificationError",
    "MissingSignature",
    "NotYetValid",
    "Expired",
    "UnsupportedScheme",
    "UnsupportedIssuerFormat",
    "InvalidSignature",
    "MalformedPayload",
]
