"""Public data types: the contracts between engine, providers and callers."""

from dataclasses import dataclass
from enum import Enum


@dataclass
class HydrateConfig:
    """Settings handed to the resolver (no process-wide state)."""
    base_path: str = ""
    debug: bool = False


class Mode(Enum):
    """How a decoded document is walked."""
    PLAIN = "plain"
    KUBERNETES = "k8s"


class RefKind(Enum):
    SELF_KEY = "self_key"
    EXPLICIT_PATH = "explicit_path"
    PLAIN = "plain"


@dataclass(frozen=True)
class Reference:
    """A classified scalar: what to look up, if anything."""
    kind: RefKind
    key: str | None = None

    @property
    def is_secret(self) -> bool:
        return self.kind is not RefKind.PLAIN
