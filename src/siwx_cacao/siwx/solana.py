import re

from siwx_cacao.siwx.base import SiwxFormatter, SiwxMessage

# CAIP-30 reference of Solana mainnet (truncated genesis hash).
SOLANA_MAINNET = "5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"


class SiwsMessage(SiwxMessage):
    """CAIP-122 Sign-In with Solana request."""


class SolanaFormatter(SiwxFormatter):
    namespace = "solana"
    network_name = "Solana"
    header_type = "caip122"
    signature_type = "solana:ed25519"
    message_class = SiwsMessage
    address_pattern = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
