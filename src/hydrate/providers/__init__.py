"""Secret backends."""

from hydrate.providers.ssm import SSMParameterStore

# Registry of available providers
PROVIDERS = {
    "ssm": SSMParameterStore,
    "pstore": SSMParameterStore,  # Alias
}

__all__ = ["PROVIDERS", "SSMParameterStore"]
