import logging
from dataclasses import dataclass
from typing import Any, Protocol

import dag_cbor
from multiformats import CID, multihash

from siwx_cacao.models import Capability

logger = logging.getLogger("siwx.block_codec")

CODEC = "dag-cbor"
HASH_FUNCTION = "sha2-256"


class BlockEncoder(Protocol):
    def encode(self, value: Any) -> tuple[bytes, CID]: ...

    def decode(self, data: bytes) -> Any: ...


class DagCborEncoder:
    """Deterministic DAG-CBOR encoding addressed by a CIDv1 over sha2-256."""

    def encode(self, value: Any) -> tuple[bytes, CID]:
        data = dag_cbor.encode(value)
        return data, content_id(data)

    def decode(self, data: bytes) -> Any:
        return dag_cbor.decode(data)


def content_id(data: bytes) -> CID:
    return CID("base32", 1, CODEC, multihash.digest(data, HASH_FUNCTION))


@dataclass(frozen=True)
class CacaoBlock:
    value: Capability
    bytes: bytes
    cid: CID


def encode_block(capability: Capability, encoder: BlockEncoder | None = None) -> CacaoBlock:
    encoder = encoder or DagCborEncoder()
    data, cid = encoder.encode(capability.to_wire())
    logger.debug(
        "cacao_block_encoded",
        extra={
            "event_name": "cacao_block_encoded",
            "cid": str(cid),
            "issuer": capability.payload.issuer,
        },
    )
    return CacaoBlock(value=capability, bytes=data, cid=cid)


def decode_block(data: bytes, encoder: BlockEncoder | None = None) -> CacaoBlock:
    encoder = encoder or DagCborEncoder()
    capability = Capability.from_wire(encoder.decode(data))
    canonical, cid = encoder.encode(capability.to_wire())
    if canonical != data:
        raise ValueError("Block bytes are not the canonical encoding of a capability")
    return CacaoBlock(value=capability, bytes=data, cid=cid)
