"""Secret resolution: path normalization and the per-run secret cache."""

import posixpath
import sys
import threading

from hydrate.pacts.errors import ConfigurationError, ResolutionError
from hydrate.pacts.provider import SecretProvider
from hydrate.pacts.types import HydrateConfig


def _under(path: str, base: str) -> bool:
    """True if ``path`` is ``base`` or lies below it, segment-wise."""
    base = base.rstrip("/")
    return path == base or path.startswith(base + "/")


class SecretResolver:
    """Resolve secret keys against a provider, fetching each path once.

    Relative keys are joined onto ``config.base_path``. Fetched values are
    cached for the lifetime of the resolver; the cache is never evicted, so a
    path referenced many times (or from several documents in one stream)
    always yields the value returned by the first fetch.
    """

    def __init__(self, provider: SecretProvider, config: HydrateConfig | None = None,
                 warnings: list[str] | None = None):
        self.provider = provider
        self.config = config or HydrateConfig()
        self.warnings: list[str] = warnings if warnings is not None else []
        self._secrets: dict[str, str] = {}
        # Held across the provider call so a path is never fetched twice
        self._lock = threading.Lock()

    @property
    def base_path(self) -> str:
        return self.config.base_path

    def normalize(self, key: str) -> str:
        """Turn a secret key into the absolute parameter path to fetch."""
        if not key:
            raise ConfigurationError("empty secret key")
        if not key.startswith("/"):
            if not self.base_path:
                raise ConfigurationError(
                    f"{key!r} doesn't look like a valid parameter path, "
                    f"did you provide default path, ie. --path=/app/sit1/ ?"
                )
            return posixpath.normpath(posixpath.join(self.base_path, key))
        if self.base_path and not _under(key, self.base_path):
            self.warnings.append(
                f"{key!r} secret key doesn't match the base path {self.base_path!r}"
            )
        return key

    def resolve(self, key: str) -> str:
        """Return the secret for ``key``; any provider failure becomes ResolutionError."""
        path = self.normalize(key)
        with self._lock:
            if path in self._secrets:
                return self._secrets[path]
            print(f"- fetching {path!r} secret from {self.provider.name}", file=sys.stderr)
            try:
                secret = self.provider.get_parameter(path)
            except Exception as exc:
                raise ResolutionError(path, exc) from exc
            self._secrets[path] = secret
            return secret

    def cached_paths(self) -> list[str]:
        """Paths fetched so far, in fetch order."""
        with self._lock:
            return list(self._secrets)
