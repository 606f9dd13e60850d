from enum import StrEnum


class ReasonCode(StrEnum):
    MISSING_SIGNATURE = "MISSING_SIGNATURE"
    NOT_YET_VALID = "NOT_YET_VALID"
    EXPIRED = "EXPIRED"
    UNSUPPORTED_SCHEME = "UNSUPPORTED_SCHEME"
    UNSUPPORTED_ISSUER_FORMAT = "UNSUPPORTED_ISSUER_FORMAT"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
