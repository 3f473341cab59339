"""Public contracts: types, errors and the provider interface."""

from hydrate.pacts.errors import (
    AccessDeniedError, ConfigurationError, EncodingError, FormatError,
    HydrateError, ParameterNotFoundError, ProviderError, ResolutionError,
    UnsupportedKindError,
)
from hydrate.pacts.provider import SecretProvider
from hydrate.pacts.types import HydrateConfig, Mode, Reference, RefKind

__all__ = [
    "HydrateConfig", "Mode", "Reference", "RefKind", "SecretProvider",
    "HydrateError", "ConfigurationError", "UnsupportedKindError",
    "EncodingError", "FormatError", "ResolutionError", "ProviderError",
    "ParameterNotFoundError", "AccessDeniedError",
]
