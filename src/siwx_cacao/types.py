from typing import Any, TypedDict


class VerifyOptionsBody(TypedDict, total=False):
    at_time: str
    clock_skew_secs: int
    revocation_phase_out_secs: int
    disable_expiration_check: bool


class VerifyRequestBody(TypedDict):
    cacao: dict[str, Any]
    options: VerifyOptionsBody


class VerifyResponseBody(TypedDict):
    valid: bool
    reason_code: str | None
    message: str | None
    cid: str
