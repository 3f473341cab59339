"""Secret backend interface consumed by the resolver."""

from abc import ABC, abstractmethod


class SecretProvider(ABC):
    """Read-only access to a hierarchical parameter store.

    Implementations return the plaintext value (decrypting secure values
    transparently) and should raise ``ParameterNotFoundError``,
    ``AccessDeniedError`` or ``ProviderError`` from ``hydrate.pacts.errors``.
    The resolver wraps whatever ``get_parameter`` raises in a
    ``ResolutionError`` naming the requested path.
    """
    name = "base"

    @abstractmethod
    def get_parameter(self, path: str) -> str:
        """Return the value stored at the absolute ``path``."""
