from siwx_cacao.caip import AccountId
from siwx_cacao.errors import MalformedMessageError, UnsupportedIssuerFormatError, UnsupportedScheme
from siwx_cacao.models import Capability, Header, Payload, Signature
from siwx_cacao.siwx.base import SiwxFormatter, SiwxMessage
from siwx_cacao.siwx.registry import MessageFormatterRegistry, default_formatters

_OPTIONAL_FIELDS = ("not_before", "expiration_time", "statement", "request_id", "resources")


class CapabilityFactory:
    """Converts between chain-specific sign-in messages and capabilities."""

    def __init__(self, formatters: MessageFormatterRegistry | None = None) -> None:
        self._formatters = default_formatters if formatters is None else formatters

    @property
    def formatters(self) -> MessageFormatterRegistry:
        return self._formatters

    def from_chain_message(self, namespace: str, message: SiwxMessage) -> Capability:
        formatter = self._formatters.require(namespace)
        if type(message) is not formatter.message_class:
            raise TypeError(
                f"{formatter.network_name} capabilities are built from "
                f"{formatter.message_class.__name__}, got {type(message).__name__}"
            )
        if message.nonce is None or message.issued_at is None:
            raise MalformedMessageError(
                "Sign-in message has no nonce or issued-at time; render it before packaging"
            )

        if formatter.includes_chain_id:
            if message.chain_id is None:
                raise MalformedMessageError(
                    f"{formatter.network_name} messages require a chain id"
                )
            reference = message.chain_id
        else:
            if message.chain_id is not None:
                raise MalformedMessageError(
                    f"{formatter.network_name} messages do not carry a chain id"
                )
            reference = str(formatter.default_chain_id)

        account = AccountId.build(
            namespace=formatter.namespace,
            reference=reference,
            address=message.address,
        )
        fields: dict[str, object] = {
            "domain": message.domain,
            "issuer": account.did,
            "audience": message.uri,
            "version": message.version,
            "nonce": message.nonce,
            "issued_at": message.issued_at,
        }
        for name in _OPTIONAL_FIELDS:
            value = getattr(message, name)
            if value is not None:
                fields[name] = list(value) if name == "resources" else value

        signature = None
        if message.signature is not None:
            signature = Signature(t=formatter.signature_type, s=message.signature)

        return Capability(
            header=Header(t=formatter.header_type),
            payload=Payload(**fields),
            signature=signature,
        )

    def resolve(self, capability: Capability) -> tuple[SiwxFormatter, AccountId]:
        """Find the formatter and issuer account a capability was built from.

        Raises ``UnsupportedIssuerFormatError`` for an unparseable issuer or an
        unregistered namespace, and ``UnsupportedScheme`` when the header or
        signature tag is not the one that namespace produces.
        """
        account = AccountId.from_did(capability.payload.issuer)
        formatter = self._formatters.require(account.namespace)

        if capability.header.t != formatter.header_type:
            raise UnsupportedScheme(
                f"Header type {capability.header.t!r} is not supported for namespace "
                f"{formatter.namespace!r}"
            )
        if capability.signature is not None and capability.signature.t != formatter.signature_type:
            raise UnsupportedScheme(
                f"Signature scheme {capability.signature.t!r} is not supported for namespace "
                f"{formatter.namespace!r}"
            )
        if not formatter.includes_chain_id and account.reference != formatter.default_chain_id:
            raise UnsupportedIssuerFormatError(
                f"{formatter.network_name} messages cannot express chain {account.chain_id!r}"
            )
        return formatter, account

    def to_chain_message(self, capability: Capability) -> SiwxMessage:
        formatter, account = self.resolve(capability)
        payload = capability.payload
        return formatter.message_class(
            domain=payload.domain,
            address=account.address,
            uri=payload.audience,
            version=payload.version,
            chain_id=account.reference if formatter.includes_chain_id else None,
            statement=payload.statement,
            nonce=payload.nonce,
            issued_at=payload.issued_at,
            expiration_time=payload.expiration_time,
            not_before=payload.not_before,
            request_id=payload.request_id,
            resources=None if payload.resources is None else list(payload.resources),
            signature=None if capability.signature is None else capability.signature.s,
        )

    def signing_input(self, capability: Capability) -> str:
        """The exact text the issuer's wallet signed."""
        formatter, _ = self.resolve(capability)
        return formatter.to_message(self.to_chain_message(capability))


default_factory = CapabilityFactory()


def from_chain_message(namespace: str, message: SiwxMessage) -> Capability:
    return default_factory.from_chain_message(namespace, message)


def to_chain_message(capability: Capability) -> SiwxMessage:
    return default_factory.to_chain_message(capability)
