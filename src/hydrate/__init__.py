"""hydrate: inject secrets from a parameter store into JSON/YAML/TOML config files."""

__version__ = "0.1.0"

from hydrate.core import SecretResolver, hydrate_document, hydrate_stream
from hydrate.pacts import HydrateConfig, HydrateError, Mode, SecretProvider

__all__ = [
    "HydrateConfig", "HydrateError", "Mode", "SecretProvider", "SecretResolver",
    "hydrate_document", "hydrate_stream",
]
