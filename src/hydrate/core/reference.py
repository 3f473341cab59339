"""Secret reference grammar: ``$$``, ``$SECRET`` and ``$SECRET:<path>``."""

from hydrate.core.resolver import SecretResolver
from hydrate.pacts.errors import HydrateError
from hydrate.pacts.types import Reference, RefKind

SELF_KEY_MARKERS = ("$$", "$SECRET")
EXPLICIT_PREFIX = "$SECRET:"

_PLAIN = Reference(RefKind.PLAIN)


def classify(value: str, current_key: str) -> Reference:
    """Classify a scalar string. Only the value decides; the key names SELF_KEY lookups."""
    if value in SELF_KEY_MARKERS:
        return Reference(RefKind.SELF_KEY, current_key)
    if value.startswith(EXPLICIT_PREFIX):
        return Reference(RefKind.EXPLICIT_PATH, value[len(EXPLICIT_PREFIX):])
    return _PLAIN


def hydrate_value(resolver: SecretResolver, key: str, value: str) -> str | None:
    """Resolve ``value`` if it is a secret reference, else return None."""
    ref = classify(value, key)
    if not ref.is_secret:
        return None
    try:
        return resolver.resolve(ref.key)
    except HydrateError as exc:
        raise exc.wrap(f"{key}={value!r}")
