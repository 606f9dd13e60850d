from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from siwx_cacao.core.config import settings
from siwx_cacao.core.reason_codes import ReasonCode
from siwx_cacao.errors import VerificationError


class VerifyOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    at_time: datetime | None = None
    clock_skew_secs: int = Field(default_factory=lambda: settings.clock_skew_seconds, ge=0)
    revocation_phase_out_secs: int = Field(
        default_factory=lambda: settings.revocation_phase_out_seconds, ge=0
    )
    disable_expiration_check: bool = Field(
        default_factory=lambda: settings.disable_expiration_check
    )


@dataclass(frozen=True)
class VerificationResult:
    error: VerificationError | None = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def reason_code(self) -> ReasonCode | None:
        return None if self.error is None else self.error.reason_code

    @property
    def message(self) -> str | None:
        return None if self.error is None else str(self.error)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
