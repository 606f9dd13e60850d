"""did:pkh issuer identifiers (CAIP-2 chain ids and CAIP-10 account ids)."""

import re
from dataclasses import dataclass

from siwx_cacao.errors import UnsupportedIssuerFormatError

DID_PKH_PREFIX = "did:pkh:"

_NAMESPACE = r"[-a-z0-9]{3,8}"
_REFERENCE = r"[-_a-zA-Z0-9]{1,32}"
_ADDRESS = r"[-.%a-zA-Z0-9]{1,128}"

_ACCOUNT_ID = re.compile(
    rf"^(?P<namespace>{_NAMESPACE}):(?P<reference>{_REFERENCE}):(?P<address>{_ADDRESS})$"
)


@dataclass(frozen=True)
class AccountId:
    namespace: str
    reference: str
    address: str

    @property
    def chain_id(self) -> str:
        return f"{self.namespace}:{self.reference}"

    @property
    def did(self) -> str:
        return f"{DID_PKH_PREFIX}{self}"

    def __str__(self) -> str:
        return f"{self.namespace}:{self.reference}:{self.address}"

    @classmethod
    def from_did(cls, issuer: str) -> "AccountId":
        if not issuer.startswith(DID_PKH_PREFIX):
            raise UnsupportedIssuerFormatError(f"Issuer is not a did:pkh identifier: {issuer!r}")
        match = _ACCOUNT_ID.match(issuer[len(DID_PKH_PREFIX) :])
        if match is None:
            raise UnsupportedIssuerFormatError(f"Malformed did:pkh account id: {issuer!r}")
        return cls(
            namespace=match["namespace"],
            reference=match["reference"],
            address=match["address"],
        )

    @classmethod
    def build(cls, *, namespace: str, reference: str, address: str) -> "AccountId":
        account = cls(namespace=namespace, reference=reference, address=address)
        if _ACCOUNT_ID.match(str(account)) is None:
            raise UnsupportedIssuerFormatError(f"Cannot build did:pkh account id from {account}")
        return account
