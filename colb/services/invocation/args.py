"""
Ordered token store for external command lines.

ArgStack does no validation: the order and content of tokens is decided by
the pipeline stages that append them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ArgStack:
    """Append-only list of command-line tokens."""

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: list[str] = [str(t) for t in tokens]

    def arg(self, token: str) -> ArgStack:
        """Append one token. Returns self for chaining."""
        self._tokens.append(str(token))
        return self

    def args(self, tokens: Iterable[str]) -> ArgStack:
        """Append tokens in the order given."""
        for token in tokens:
            self.arg(token)
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"ArgStack({self._tokens!r})"

    def to_list(self) -> list[str]:
        """Copy of the tokens in insertion order."""
        return list(self._tokens)
