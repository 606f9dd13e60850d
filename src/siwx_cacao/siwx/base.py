"""Sign-In with X (CAIP-122) message rendering and parsing.

A formatter owns the canonical text layout of one chain namespace. The
layout is a fixed protocol: the rendered text must byte-match what wallets
sign, and ``parse`` accepts exactly that layout and nothing else.
"""

import re
import secrets
import string
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from siwx_cacao.core.config import MIN_NONCE_LENGTH, settings
from siwx_cacao.core.timestamps import is_valid_timestamp, utc_now_iso
from siwx_cacao.errors import MalformedMessageError
from siwx_cacao.models import ensure_single_line

NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_PATTERN = re.compile(rf"^[A-Za-z0-9]{{{MIN_NONCE_LENGTH},}}$")
END_OF_MESSAGE = "<end of message>"


def generate_nonce(length: int | None = None) -> str:
    size = max(MIN_NONCE_LENGTH, length or settings.effective_nonce_length)
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(size))


class SiwxMessage(BaseModel):
    """A structured sign-in request, optionally carrying the wallet signature."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    domain: str = Field(min_length=1)
    address: str = Field(min_length=1)
    uri: str = Field(min_length=1)
    version: str = Field(min_length=1)
    chain_id: str | None = None
    statement: str | None = Field(default=None, min_length=1)
    nonce: str | None = None
    issued_at: str | None = None
    expiration_time: str | None = None
    not_before: str | None = None
    request_id: str | None = None
    resources: list[str] | None = None
    signature: str | None = None

    @field_validator(
        "domain",
        "address",
        "uri",
        "version",
        "chain_id",
        "statement",
        "nonce",
        "issued_at",
        "expiration_time",
        "not_before",
        "request_id",
    )
    @classmethod
    def _single_line(cls, value: str | None) -> str | None:
        return ensure_single_line(value)

    @field_validator("resources")
    @classmethod
    def _resources_single_line(cls, value: list[str] | None) -> list[str] | None:
        if value is not None:
            for resource in value:
                ensure_single_line(resource)
        return value


@dataclass(frozen=True)
class _Field:
    label: str
    attr: str
    required: bool
    timestamp: bool = False

    @property
    def prefix(self) -> str:
        return f"{self.label}: "


class SiwxFormatter:
    namespace: ClassVar[str]
    network_name: ClassVar[str]
    header_type: ClassVar[str]
    signature_type: ClassVar[str]
    message_class: ClassVar[type[SiwxMessage]] = SiwxMessage
    includes_chain_id: ClassVar[bool] = True
    default_chain_id: ClassVar[str | None] = None
    address_pattern: ClassVar[re.Pattern[str] | None] = None

    def __init__(self, *, nonce_length: int | None = None) -> None:
        self._nonce_length = nonce_length
        network = re.escape(self.network_name)
        self._header = re.compile(
            rf"^(?P<domain>.+) wants you to sign in with your {network} account:$"
        )

    def prepare(self, message: SiwxMessage) -> SiwxMessage:
        """Return a copy of ``message`` with a nonce and issued-at time filled in."""
        updates: dict[str, str] = {}
        if message.nonce is None:
            updates["nonce"] = generate_nonce(self._nonce_length)
        if message.issued_at is None:
            updates["issued_at"] = utc_now_iso()
        if not updates:
            return message
        return message.model_copy(update=updates)

    def render(self, message: SiwxMessage) -> tuple[str, SiwxMessage]:
        """Render the text a wallet signs.

        Returns the text and the request it was rendered from. A request
        without a nonce or issued-at time gets fresh ones; keep the returned
        request so the same values are reused on the next render.
        """
        prepared = self.prepare(message)
        if self.includes_chain_id and prepared.chain_id is None:
            raise MalformedMessageError(f"{self.network_name} messages require a chain id")

        lines = [
            f"{prepared.domain} wants you to sign in with your {self.network_name} account:",
            prepared.address,
            "",
        ]
        if prepared.statement is not None:
            lines.extend([prepared.statement, ""])

        for field in self._fields():
            value = getattr(prepared, field.attr)
            if value is not None:
                lines.append(f"{field.prefix}{value}")

        if prepared.resources is not None:
            lines.append("Resources:")
            lines.extend(f"- {resource}" for resource in prepared.resources)

        return "\n".join(lines), prepared

    def to_message(self, message: SiwxMessage) -> str:
        text, _ = self.render(message)
        return text

    def parse(self, text: str) -> SiwxMessage:
        lines = text.split("\n")

        def fail(reason: str, pos: int) -> MalformedMessageError:
            line = lines[pos] if pos < len(lines) else END_OF_MESSAGE
            return MalformedMessageError(reason, line_number=pos + 1, line=line)

        header = self._header.match(lines[0])
        if header is None:
            raise fail(
                f"expected '<domain> wants you to sign in with your {self.network_name} "
                "account:'",
                0,
            )
        values: dict[str, object] = {"domain": header["domain"]}

        if len(lines) < 2 or not lines[1]:
            raise fail("missing address", 1)
        if self.address_pattern is not None and not self.address_pattern.match(lines[1]):
            raise fail(f"invalid {self.network_name} address", 1)
        values["address"] = lines[1]

        if len(lines) < 3 or lines[2] != "":
            raise fail("expected blank line after address", 2)

        # A statement is present exactly when the line after it is blank.
        pos = 3
        if pos + 1 < len(lines) and lines[pos] and lines[pos + 1] == "":
            values["statement"] = lines[pos]
            pos += 2
        elif pos < len(lines) and lines[pos] and not lines[pos].startswith("URI: "):
            raise fail("expected blank line after statement", pos + 1)

        for field in self._fields():
            if pos < len(lines) and lines[pos].startswith(field.prefix):
                value = lines[pos][len(field.prefix) :]
                self._check_field(field, value, fail, pos)
                values[field.attr] = value
                pos += 1
            elif field.required:
                raise fail(f"missing required field '{field.label}'", pos)

        if pos < len(lines) and lines[pos] == "Resources:":
            pos += 1
            resources = []
            while pos < len(lines) and lines[pos].startswith("- "):
                resources.append(lines[pos][2:])
                pos += 1
            values["resources"] = resources

        if pos < len(lines):
            raise fail("unexpected or out-of-order line", pos)

        return self.message_class(**values)

    def _fields(self) -> list[_Field]:
        fields = [_Field("URI", "uri", True), _Field("Version", "version", True)]
        if self.includes_chain_id:
            fields.append(_Field("Chain ID", "chain_id", True))
        fields.extend(
            [
                _Field("Nonce", "nonce", True),
                _Field("Issued At", "issued_at", True, timestamp=True),
                _Field("Expiration Time", "expiration_time", False, timestamp=True),
                _Field("Not Before", "not_before", False, timestamp=True),
                _Field("Request ID", "request_id", False),
            ]
        )
        return fields

    @staticmethod
    def _check_field(
        field: _Field,
        value: str,
        fail: Callable[[str, int], MalformedMessageError],
        pos: int,
    ) -> None:
        if field.required and not value:
            raise fail(f"empty value for '{field.label}'", pos)
        if field.timestamp and not is_valid_timestamp(value):
            raise fail(f"unparsable timestamp for '{field.label}'", pos)
        if field.attr == "nonce" and not NONCE_PATTERN.match(value):
            raise fail(f"nonce must be at least {MIN_NONCE_LENGTH} alphanumeric characters", pos)
