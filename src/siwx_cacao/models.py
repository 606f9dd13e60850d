from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def ensure_single_line(value: str | None) -> str | None:
    if value is not None and ("\n" in value or "\r" in value):
        raise ValueError("must not contain line breaks")
    return value


class CacaoModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class Header(CacaoModel):
    t: str = Field(min_length=1)


class Payload(CacaoModel):
    domain: str = Field(min_length=1)
    issuer: str = Field(alias="iss", min_length=1)
    audience: str = Field(alias="aud")
    version: str
    nonce: str
    issued_at: str = Field(alias="iat")
    not_before: str | None = Field(default=None, alias="nbf")
    expiration_time: str | None = Field(default=None, alias="exp")
    statement: str | None = Field(default=None, min_length=1)
    request_id: str | None = Field(default=None, alias="requestId")
    resources: list[str] | None = None

    @field_validator("statement")
    @classmethod
    def _statement_single_line(cls, value: str | None) -> str | None:
        return ensure_single_line(value)


class Signature(CacaoModel):
    t: str = Field(min_length=1)
    s: str


class Capability(CacaoModel):
    """A CACAO: header, payload and (once signed) the wallet signature."""

    header: Header = Field(alias="h")
    payload: Payload = Field(alias="p")
    signature: Signature | None = Field(default=None, alias="s")

    @property
    def is_signed(self) -> bool:
        return self.signature is not None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, value: Any) -> "Capability":
        return cls.model_validate(value)
