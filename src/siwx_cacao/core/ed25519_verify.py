import logging

import base58
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

logger = logging.getLogger("siwx.ed25519")


def verify_ed25519_signature(
    *,
    public_key: bytes,
    message: bytes,
    signature: bytes,
) -> bool:
    try:
        VerifyKey(public_key).verify(message, signature)
        return True
    except BadSignatureError:
        # Normal invalid signature path.
        return False
    except ValueError:
        # Likely malformed key/signature inputs.
        logger.warning("invalid_input_in_ed25519_verify", exc_info=True)
        return False
    except Exception:
        logger.warning("unexpected_error_in_ed25519_verify", exc_info=True)
        return False


def verify_solana_signature(*, address: str, message: str, signature: str) -> bool:
    """Verify a base58 ed25519 signature over the UTF-8 message by a base58 Solana address."""
    try:
        public_key = base58.b58decode(address)
        raw_signature = base58.b58decode(signature)
    except ValueError:
        logger.warning("invalid_base58_in_solana_verify", exc_info=True)
        return False

    return verify_ed25519_signature(
        public_key=public_key,
        message=message.encode("utf-8"),
        signature=raw_signature,
    )
