from siwx_cacao.core.reason_codes import ReasonCode


class CacaoError(Exception):
    """Base error for sign-in message and capability operations."""


class MalformedMessageError(CacaoError, ValueError):
    """A sign-in message does not match the canonical layout."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message} ({line!r})"
        super().__init__(message)


class UnsupportedIssuerFormatError(CacaoError, ValueError):
    """The issuer is not a did:pkh identifier for a known namespace."""


class VerificationError(CacaoError):
    """A capability was rejected. Returned as a value by the verify engine."""

    reason_code: ReasonCode

    def __init__(self, message: str | None = None):
        super().__init__(message or self.reason_code.value)


class MissingSignature(VerificationError):
    reason_code = ReasonCode.MISSING_SIGNATURE


class NotYetValid(VerificationError):
    reason_code = ReasonCode.NOT_YET_VALID


class Expired(VerificationError):
    reason_code = ReasonCode.EXPIRED


class UnsupportedScheme(VerificationError):
    reason_code = ReasonCode.UNSUPPORTED_SCHEME


class UnsupportedIssuerFormat(VerificationError):
    reason_code = ReasonCode.UNSUPPORTED_ISSUER_FORMAT


class InvalidSignature(VerificationError):
    reason_code = ReasonCode.INVALID_SIGNATURE


class MalformedPayload(VerificationError):
    reason_code = ReasonCode.MALFORMED_PAYLOAD
