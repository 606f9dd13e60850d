import logging
from time import perf_counter

from fastapi import APIRouter

from siwx_cacao.modules.block_codec import encode_block
from siwx_cacao.modules.verify_engine import verify
from siwx_cacao.schemas.verify import VerifyRequest, VerifyResponse

router = APIRouter(tags=["verify"])
logger = logging.getLogger("siwx.verify")


@router.post(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify CACAO",
    description=(
        "Checks a signed sign-in capability against its validity window and the "
        "issuer's wallet signature. Rejections are returned as data with a reason code."
    ),
)
def verify_endpoint(payload: VerifyRequest) -> VerifyResponse:
    start = perf_counter()
    result = verify(payload.cacao, payload.options)
    block = encode_block(payload.cacao)
    latency_ms = (perf_counter() - start) * 1000

    logger.info(
        "verify_decision",
        extra={
            "event_name": "verify_decision",
            "issuer": payload.cacao.payload.issuer,
            "valid": result.valid,
            "reason_code": result.reason_code,
            "cid": str(block.cid),
            "latency_ms": round(latency_ms, 2),
            "path": "/verify",
            "method": "POST",
        },
    )
    return VerifyResponse(
        valid=result.valid,
        reason_code=result.reason_code,
        message=result.message,
        cid=str(block.cid),
    )
