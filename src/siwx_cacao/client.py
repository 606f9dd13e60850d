import httpx

from siwx_cacao.models import Capability
from siwx_cacao.types import VerifyOptionsBody, VerifyRequestBody, VerifyResponseBody


def build_verify_request(
    capability: Capability, options: VerifyOptionsBody | None = None
) -> VerifyRequestBody:
    return {"cacao": capability.to_wire(), "options": options or {}}


class CacaoVerifierClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def verify(
        self, capability: Capability, options: VerifyOptionsBody | None = None
    ) -> VerifyResponseBody:
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            response = client.post(
                f"{self._base_url}/verify",
                json=build_verify_request(capability, options),
            )
            response.raise_for_status()
            return response.json()


class AsyncCacaoVerifierClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def verify(
        self, capability: Capability, options: VerifyOptionsBody | None = None
    ) -> VerifyResponseBody:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                f"{self._base_url}/verify",
                json=build_verify_request(capability, options),
            )
            response.raise_for_status()
            return response.json()
