import pytest

from siwx_cacao.errors import MalformedMessageError, UnsupportedIssuerFormatError, UnsupportedScheme
from siwx_cacao.factory import CapabilityFactory, from_chain_message, to_chain_message
from siwx_cacao.models import Capability, Signature
from siwx_cacao.siwx import (
    SOLANA_MAINNET,
    MessageFormatterRegistry,
    SiweMessage,
    SiwsMessage,
    SiwxFormatter,
    SiwxMessage,
)

ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"


def _siwe(**overrides: object) -> SiweMessage:
    params: dict[str, object] = {
        "domain": "service.org",
        "address": ADDRESS,
        "statement": "I accept the ServiceOrg Terms of Service: https://service.org/tos",
        "uri": "https://service.org/login",
        "version": "1",
        "chain_id": "1",
        "nonce": "32891757",
        "issued_at": "2021-09-30T16:25:24.000Z",
        "resources": [
            "ipfs://Qme7ss3ARVgxv6rXqVPiikMJ8u2NLgmgszg13pYrDKEoiu",
            "https://example.com/my-web2-claim.json",
        ],
    }
    params.update(overrides)
    return SiweMessage(**params)


class PlainFormatter(SiwxFormatter):
    namespace = "plain"
    network_name = "Plain"
    header_type = "caip122"
    signature_type = "plain:sha256"
    includes_chain_id = False
    default_chain_id = "main"


def test_from_chain_message_maps_fields() -> None:
    cacao = from_chain_message("eip155", _siwe(signature="0xdeadbeef"))

    assert cacao.header.t == "eip4361"
    assert cacao.payload.issuer == f"did:pkh:eip155:1:{ADDRESS}"
    assert cacao.payload.audience == "https://service.org/login"
    assert cacao.payload.issued_at == "2021-09-30T16:25:24.000Z"
    assert cacao.payload.resources == _siwe().resources
    assert cacao.signature == Signature(t="eip191", s="0xdeadbeef")


def test_from_chain_message_writes_no_placeholders_for_absent_fields() -> None:
    cacao = from_chain_message("eip155", _siwe(statement=None, resources=None))

    wire = cacao.to_wire()
    assert set(wire) == {"h", "p"}
    assert set(wire["p"]) == {"domain", "iss", "aud", "version", "nonce", "iat"}
    assert cacao.signature is None


def test_wire_keys_use_cacao_names() -> None:
    cacao = from_chain_message(
        "eip155",
        _siwe(
            expiration_time="2021-10-30T16:25:24.000Z",
            not_before="2021-09-30T16:25:24.000Z",
            request_id="abc",
            signature="0x01",
        ),
    )

    wire = cacao.to_wire()
    assert wire["p"]["exp"] == "2021-10-30T16:25:24.000Z"
    assert wire["p"]["nbf"] == "2021-09-30T16:25:24.000Z"
    assert wire["p"]["requestId"] == "abc"
    assert wire["s"] == {"t": "eip191", "s": "0x01"}
    assert Capability.from_wire(wire) == cacao


def test_round_trip_ethereum_message() -> None:
    message = _siwe(
        expiration_time="2021-10-30T16:25:24.000Z",
        request_id="abc",
        signature="0xdeadbeef",
    )

    assert to_chain_message(from_chain_message("eip155", message)) == message


def test_round_trip_unsigned_message_without_optional_fields() -> None:
    message = _siwe(statement=None, resources=None)

    assert to_chain_message(from_chain_message("eip155", message)) == message


def test_round_trip_solana_message(solana_address: str) -> None:
    message = SiwsMessage(
        domain="service.org",
        address=solana_address,
        uri="https://service.org/login",
        version="1",
        chain_id=SOLANA_MAINNET,
        nonce="Xk2a9QmN7p",
        issued_at="2022-03-01T10:00:00.000Z",
        signature="3yZe7d",
    )

    cacao = from_chain_message("solana", message)

    assert cacao.header.t == "caip122"
    assert cacao.payload.issuer == f"did:pkh:solana:{SOLANA_MAINNET}:{solana_address}"
    assert cacao.signature is not None
    assert cacao.signature.t == "solana:ed25519"
    assert to_chain_message(cacao) == message


def test_from_chain_message_requires_nonce_and_issued_at() -> None:
    with pytest.raises(MalformedMessageError):
        from_chain_message("eip155", _siwe(nonce=None))

    with pytest.raises(MalformedMessageError):
        from_chain_message("eip155", _siwe(issued_at=None))


def test_from_chain_message_unknown_namespace() -> None:
    with pytest.raises(UnsupportedIssuerFormatError):
        from_chain_message("cosmos", _siwe())


def test_from_chain_message_rejects_other_message_class() -> None:
    generic = SiwxMessage(**_siwe().model_dump())

    with pytest.raises(TypeError, match="SiweMessage"):
        from_chain_message("eip155", generic)


def test_to_chain_message_rejects_non_pkh_issuer() -> None:
    cacao = from_chain_message("eip155", _siwe())
    bad = cacao.model_copy(
        update={"payload": cacao.payload.model_copy(update={"issuer": "did:key:z6Mkabc"})}
    )

    with pytest.raises(UnsupportedIssuerFormatError):
        to_chain_message(bad)


def test_to_chain_message_rejects_foreign_signature_scheme() -> None:
    cacao = from_chain_message("eip155", _siwe(signature="0x01"))
    foreign = cacao.model_copy(update={"signature": Signature(t="solana:ed25519", s="abc")})

    with pytest.raises(UnsupportedScheme):
        to_chain_message(foreign)


def test_to_chain_message_rejects_foreign_header() -> None:
    cacao = from_chain_message("eip155", _siwe())
    foreign = cacao.model_copy(update={"header": cacao.header.model_copy(update={"t": "caip122"})})

    with pytest.raises(UnsupportedScheme):
        to_chain_message(foreign)


def test_namespace_without_chain_id_uses_default_reference() -> None:
    factory = CapabilityFactory(MessageFormatterRegistry([PlainFormatter()]))
    message = SiwxMessage(
        domain="service.org",
        address="user-1",
        uri="https://service.org/login",
        version="1",
        nonce="abcdefgh12",
        issued_at="2022-03-01T10:00:00Z",
    )

    cacao = factory.from_chain_message("plain", message)

    assert cacao.payload.issuer == "did:pkh:plain:main:user-1"
    assert factory.to_chain_message(cacao) == message
    assert "Chain ID" not in factory.signing_input(cacao)


def test_namespace_without_chain_id_rejects_explicit_chain() -> None:
    factory = CapabilityFactory(MessageFormatterRegistry([PlainFormatter()]))
    message = SiwxMessage(
        domain="service.org",
        address="user-1",
        uri="https://service.org/login",
        version="1",
        chain_id="testnet",
        nonce="abcdefgh12",
        issued_at="2022-03-01T10:00:00Z",
    )

    with pytest.raises(MalformedMessageError):
        factory.from_chain_message("plain", message)


def test_namespace_without_chain_id_cannot_express_other_chain() -> None:
    factory = CapabilityFactory(MessageFormatterRegistry([PlainFormatter()]))
    message = SiwxMessage(
        domain="service.org",
        address="user-1",
        uri="https://service.org/login",
        version="1",
        nonce="abcdefgh12",
        issued_at="2022-03-01T10:00:00Z",
    )
    cacao = factory.from_chain_message("plain", message)
    other_chain = cacao.model_copy(
        update={
            "payload": cacao.payload.model_copy(update={"issuer": "did:pkh:plain:testnet:user-1"})
        }
    )

    with pytest.raises(UnsupportedIssuerFormatError):
        factory.to_chain_message(other_chain)
