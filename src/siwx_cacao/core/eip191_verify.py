import logging

from eth_account import Account
from eth_account.messages import encode_defunct

logger = logging.getLogger("siwx.eip191")


def recover_eip191_signer(*, message: str, signature: str) -> str:
    return Account.recover_message(encode_defunct(text=message), signature=signature)


def verify_eip191_signature(*, address: str, message: str, signature: str) -> bool:
    """Recover the personal-sign signer of ``message`` and compare it with ``address``.

    Addresses are compared case-insensitively, so EIP-55 checksummed and
    lower-case forms of the same account both match.
    """
    try:
        recovered = recover_eip191_signer(message=message, signature=signature)
    except ValueError:
        logger.warning("invalid_input_in_eip191_verify", exc_info=True)
        return False
    except Exception:
        logger.warning("unexpected_error_in_eip191_verify", exc_info=True)
        return False

    return recovered.lower() == address.lower()
