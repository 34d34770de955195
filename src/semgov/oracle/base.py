"""Oracle transport protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClassificationOracle(Protocol):
    """Anything that answers a free-form prompt with free-form text.

    Implementations raise ``OracleError`` when the request cannot be made.
    """

    def ask(self, prompt: str) -> str:
        ...
