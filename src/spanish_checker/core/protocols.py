"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol


class CheckProvider(Protocol):
    """Contract for grammar-check transport backends.

    Any object that implements :meth:`submit` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def submit(self, text: str) -> Any:
        """Send *text* for checking and return the decoded JSON body.

        The returned object is expected to be a dict holding a
        ``"matches"`` list, but implementations do not validate it —
        schema checks belong to the core layer.

        Raises
        ------
        NetworkError
            When the service cannot be reached.
        DecodeError
            When the response body is not valid JSON.
        """
        ...  # pragma: no cover
