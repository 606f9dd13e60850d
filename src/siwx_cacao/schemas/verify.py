from pydantic import BaseModel, ConfigDict, Field

from siwx_cacao.core.reason_codes import ReasonCode
from siwx_cacao.models import Capability
from siwx_cacao.modules.verify_engine.schema import VerifyOptions


class VerifyRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cacao: Capability
    options: VerifyOptions = Field(default_factory=VerifyOptions)


class VerifyResponse(BaseModel):
    valid: bool
    reason_code: ReasonCode | None
    message: str | None
    cid: str
