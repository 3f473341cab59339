"""Engine entry points: hydrate a decoded document or a whole encoded stream."""

from hydrate.core.codecs import get_codec
from hydrate.core.k8s import hydrate_k8s_object
from hydrate.core.resolver import SecretResolver
from hydrate.core.walker import hydrate_map
from hydrate.pacts.types import Mode


def hydrate_document(resolver: SecretResolver, doc: dict, mode: Mode = Mode.PLAIN) -> dict:
    """Hydrate ``doc`` in place; returns the same instance."""
    if mode is Mode.KUBERNETES:
        return hydrate_k8s_object(resolver, doc)
    return hydrate_map(resolver, doc)


def hydrate_stream(resolver: SecretResolver, raw: bytes, fmt: str,
                   mode: Mode = Mode.PLAIN) -> bytes:
    """Decode every document in ``raw``, hydrate them in order, re-encode.

    Nothing is encoded until all documents hydrated, so a failure never
    yields partial output.
    """
    codec = get_codec(fmt)
    docs = codec.decode(raw)
    for doc in docs:
        hydrate_document(resolver, doc, mode)
    return codec.encode(docs)
