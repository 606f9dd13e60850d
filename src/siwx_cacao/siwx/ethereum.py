import re

from siwx_cacao.siwx.base import SiwxFormatter, SiwxMessage


class SiweMessage(SiwxMessage):
    """EIP-4361 Sign-In with Ethereum request."""


class EthereumFormatter(SiwxFormatter):
    namespace = "eip155"
    network_name = "Ethereum"
    header_type = "eip4361"
    signature_type = "eip191"
    message_class = SiweMessage
    address_pattern = re.compile(r"^0x[a-fA-F0-9]{40}$")
