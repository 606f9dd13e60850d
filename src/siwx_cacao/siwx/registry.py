from collections.abc import Iterable, Iterator

from siwx_cacao.errors import UnsupportedIssuerFormatError
from siwx_cacao.siwx.base import SiwxFormatter
from siwx_cacao.siwx.ethereum import EthereumFormatter
from siwx_cacao.siwx.solana import SolanaFormatter


class MessageFormatterRegistry:
    """Namespace tag -> message formatter."""

    def __init__(self, formatters: Iterable[SiwxFormatter] = ()) -> None:
        self._formatters: dict[str, SiwxFormatter] = {}
        for formatter in formatters:
            self.register(formatter)

    def register(self, formatter: SiwxFormatter, *, replace: bool = False) -> None:
        if formatter.namespace in self._formatters and not replace:
            raise ValueError(f"Namespace already registered: {formatter.namespace}")
        self._formatters[formatter.namespace] = formatter

    def get(self, namespace: str) -> SiwxFormatter | None:
        return self._formatters.get(namespace)

    def require(self, namespace: str) -> SiwxFormatter:
        formatter = self._formatters.get(namespace)
        if formatter is None:
            raise UnsupportedIssuerFormatError(
                f"No message format registered for namespace {namespace!r}"
            )
        return formatter

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._formatters

    def __iter__(self) -> Iterator[SiwxFormatter]:
        return iter(self._formatters.values())


default_formatters = MessageFormatterRegistry([EthereumFormatter(), SolanaFormatter()])
