"""Error taxonomy shared by the engine, the providers and the CLI."""


class HydrateError(Exception):
    """Base class for every hydration failure."""

    def wrap(self, context: str) -> "HydrateError":
        """Prepend context to the message, keeping type and attributes."""
        message = self.args[0] if self.args else ""
        self.args = (f"{context}: {message}",) + self.args[1:]
        return self


class ConfigurationError(HydrateError):
    """Secret key can't be turned into an absolute parameter path."""


class UnsupportedKindError(HydrateError):
    """Kubernetes manifest kind other than ConfigMap or Secret."""


class EncodingError(HydrateError):
    """Base64 field value that doesn't decode."""


class FormatError(HydrateError):
    """Document (or nested file) that the codec can't decode or encode."""


class ResolutionError(HydrateError):
    """Provider lookup failed for the requested key."""

    def __init__(self, key: str, cause: Exception):
        super().__init__(f"failed to fetch {key!r} parameter: {cause}")
        self.key = key
        self.__cause__ = cause


class ProviderError(HydrateError):
    """Secret backend failure (transport, throttling, unknown error code)."""


class ParameterNotFoundError(ProviderError):
    """Parameter doesn't exist in the backend."""


class AccessDeniedError(ProviderError):
    """Caller isn't allowed to read (or decrypt) the parameter."""
