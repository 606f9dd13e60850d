import logging
from datetime import UTC, datetime, timedelta

from siwx_cacao.caip import AccountId
from siwx_cacao.core.timestamps import as_utc, parse_timestamp
from siwx_cacao.errors import (
    Expired,
    InvalidSignature,
    MalformedPayload,
    MissingSignature,
    NotYetValid,
    UnsupportedIssuerFormat,
    UnsupportedIssuerFormatError,
    UnsupportedScheme,
    VerificationError,
)
from siwx_cacao.factory import CapabilityFactory, default_factory
from siwx_cacao.models import Capability
from siwx_cacao.modules.verify_engine.registry import SignatureVerifierRegistry, default_verifiers
from siwx_cacao.modules.verify_engine.schema import VerificationResult, VerifyOptions

logger = logging.getLogger("siwx.verify_engine")


_MICROSECOND = timedelta(microseconds=1)


def _failed(error: VerificationError) -> VerificationResult:
    return VerificationResult(error=error)


def _later_by(moment: datetime, reference: datetime, seconds: int) -> bool:
    """Whether ``moment`` is more than ``seconds`` after ``reference``.

    Compared in whole microseconds so arbitrarily large windows never overflow.
    """
    return (moment - reference) // _MICROSECOND > seconds * 1_000_000


class VerificationEngine:
    """Checks a capability's validity window and its issuer's signature.

    Checks run in a fixed order and the first failure is the result:
    missing signature, not yet valid, expired, unsupported issuer or scheme,
    invalid signature. Caller data never makes ``verify`` raise.
    """

    def __init__(
        self,
        *,
        factory: CapabilityFactory | None = None,
        verifiers: SignatureVerifierRegistry | None = None,
    ) -> None:
        self._factory = default_factory if factory is None else factory
        self._verifiers = default_verifiers if verifiers is None else verifiers

    def verify(
        self, capability: Capability, options: VerifyOptions | None = None
    ) -> VerificationResult:
        result = self._check(capability, options or VerifyOptions())
        logger.info(
            "capability_verification",
            extra={
                "event_name": "capability_verification",
                "issuer": capability.payload.issuer,
                "scheme": None if capability.signature is None else capability.signature.t,
                "valid": result.valid,
                "reason_code": result.reason_code,
            },
        )
        return result

    def _check(self, capability: Capability, options: VerifyOptions) -> VerificationResult:
        signature = capability.signature
        if signature is None:
            return _failed(MissingSignature("Capability has not been signed"))

        payload = capability.payload
        skew = options.clock_skew_secs

        try:
            at_time = datetime.now(tz=UTC) if options.at_time is None else as_utc(options.at_time)
            issued_at = parse_timestamp(payload.issued_at)
            not_before = None if payload.not_before is None else parse_timestamp(payload.not_before)
            expiration_time = (
                None
                if payload.expiration_time is None
                else parse_timestamp(payload.expiration_time)
            )
        except ValueError as exc:
            return _failed(MalformedPayload(str(exc)))

        if _later_by(issued_at, at_time, skew):
            return _failed(NotYetValid(f"Capability issued in the future ({payload.issued_at})"))
        if not_before is not None and _later_by(not_before, at_time, skew):
            return _failed(NotYetValid(f"Capability not valid before {payload.not_before}"))

        if not options.disable_expiration_check and expiration_time is not None:
            phase_out = options.revocation_phase_out_secs
            if _later_by(at_time, expiration_time, phase_out + skew):
                return _failed(Expired(f"Capability expired at {payload.expiration_time}"))

        try:
            account = AccountId.from_did(payload.issuer)
        except UnsupportedIssuerFormatError as exc:
            return _failed(UnsupportedIssuerFormat(str(exc)))
        if account.namespace not in self._factory.formatters:
            return _failed(UnsupportedScheme(f"Unsupported namespace {account.namespace!r}"))

        try:
            signing_input = self._factory.signing_input(capability)
        except UnsupportedScheme as exc:
            return _failed(exc)
        except UnsupportedIssuerFormatError as exc:
            return _failed(UnsupportedIssuerFormat(str(exc)))
        except ValueError as exc:
            return _failed(MalformedPayload(str(exc)))

        verifier = self._verifiers.get(signature.t)
        if verifier is None:
            return _failed(UnsupportedScheme(f"No verifier registered for scheme {signature.t!r}"))

        try:
            verified = verifier.verify(account.address, signing_input, signature.s)
        except Exception:
            logger.warning(
                "signature_verifier_raised",
                extra={"event_name": "signature_verifier_raised", "scheme": signature.t},
                exc_info=True,
            )
            verified = False

        if not verified:
            return _failed(InvalidSignature("Signature does not match the issuer"))
        return VerificationResult()


default_engine = VerificationEngine()


def verify(capability: Capability, options: VerifyOptions | None = None) -> VerificationResult:
    return default_engine.verify(capability, options)
