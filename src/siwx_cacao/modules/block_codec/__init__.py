from siwx_cacao.modules.block_codec.service import (
    BlockEncoder,
    CacaoBlock,
    DagCborEncoder,
    content_id,
    decode_block,
    encode_block,
)

__all__ = [
    "BlockEncoder",
    "CacaoBlock",
    "DagCborEncoder",
    "content_id",
    "decode_block",
    "encode_block",
]
