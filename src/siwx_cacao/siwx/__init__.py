from siwx_cacao.siwx.base import SiwxFormatter, SiwxMessage, generate_nonce
from siwx_cacao.siwx.ethereum import EthereumFormatter, SiweMessage
from siwx_cacao.siwx.registry import MessageFormatterRegistry, default_formatters
from siwx_cacao.siwx.solana import SOLANA_MAINNET, SiwsMessage, SolanaFormatter

__all__ = [
    "SiwxFormatter",
    "SiwxMessage",
    "generate_nonce",
    "EthereumFormatter",
    "SiweMessage",
    "SolanaFormatter",
    "SiwsMessage",
    "SOLANA_MAINNET",
    "MessageFormatterRegistry",
    "default_formatters",
]
