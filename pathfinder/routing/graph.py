"""Token registry and the implicit token graph used for path discovery.

The pool graph is never materialized: pools are created on-chain
independently of this process, so edges are checked on demand through the
oracle. TokenGraph only answers which tokens may appear as intermediates.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pathfinder.models.token import Token
from pathfinder.models.types import normalize_address


class TokenRegistry:
    """Read-only view of the caller's token list, keyed by address.

    Insertion order is preserved so enumeration order (and therefore tie
    order in ranking) is deterministic.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: dict[str, Token] = {}
        for token in tokens:
            self.add(token)

    def add(self, token: Token) -> bool:
        """Add a token. Returns False if the address is already known."""
        if token.address in self._tokens:
            return False
        self._tokens[token.address] = token
        return True

    def remove(self, address: str) -> Token | None:
        return self._tokens.pop(normalize_address(address), None)

    def get(self, address: str) -> Token | None:
        return self._tokens.get(normalize_address(address))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Token):
            return item.address in self._tokens
        if isinstance(item, str):
            return normalize_address(item) in self._tokens
        return False

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens.values())

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def tokens(self) -> list[Token]:
        return list(self._tokens.values())


class TokenGraph:
    """Graph of tokens whose edges (pools) are discovered on demand."""

    def __init__(self, registry: TokenRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> TokenRegistry:
        return self._registry

    @property
    def token_count(self) -> int:
        return len(self._registry)

    def has_token(self, token: Token | str) -> bool:
        return token in self._registry

    def resolve(self, token: Token | str) -> Token:
        """Return the Token for an address (or pass a Token through).

        Raises:
            ValueError: If an address is not in the registry
        """
        if isinstance(token, Token):
            return token
        resolved = self._registry.get(token)
        if resolved is None:
            raise ValueError(f"Unknown token: {token}")
        return resolved

    def intermediates(self, source: Token, destination: Token) -> list[Token]:
        """Tokens admissible as intermediate hops between source and destination."""
        excluded = {source.address, destination.address}
        return [token for token in self._registry if token.address not in excluded]


__all__ = ["TokenGraph", "TokenRegistry"]
