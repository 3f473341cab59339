"""Hydration engine."""

from hydrate.core.hydrate import hydrate_document, hydrate_stream
from hydrate.core.resolver import SecretResolver

__all__ = ["SecretResolver", "hydrate_document", "hydrate_stream"]
