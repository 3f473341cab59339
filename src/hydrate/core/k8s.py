"""Kubernetes ConfigMap/Secret hydration: per-field base64 handling and nested files."""

import base64
import binascii
import sys

from hydrate.core.codecs import format_from_filename, get_codec, is_structured
from hydrate.core.reference import hydrate_value
from hydrate.core.resolver import SecretResolver
from hydrate.core.walker import hydrate_map
from hydrate.pacts.errors import EncodingError, HydrateError, UnsupportedKindError

# kind -> ((field group, base64-encoded), ...)
FIELD_GROUPS = {
    "ConfigMap": (("data", False), ("binaryData", True)),
    "Secret": (("data", True), ("stringData", False)),
}


def _full_name(kind: str, manifest: dict) -> str:
    """Return 'kind/name' string for diagnostics."""
    meta = manifest.get("metadata")
    name = meta.get("name") if isinstance(meta, dict) else None
    return f"{kind.lower()}/{name or '?'}"


def _decode_field(value: str, encoded: bool) -> bytes:
    raw = value.encode("utf-8")
    if not encoded:
        return raw
    # Line breaks are tolerated inside base64 payloads
    return base64.b64decode(raw.replace(b"\r", b"").replace(b"\n", b""), validate=True)


def _encode_field(raw: bytes, encoded: bool) -> str:
    if encoded:
        return base64.b64encode(raw).decode("ascii")
    return raw.decode("utf-8")


def hydrate_file(resolver: SecretResolver, filename: str, raw: bytes) -> bytes:
    """Hydrate a nested JSON/YAML/TOML file held in a manifest field."""
    codec = get_codec(format_from_filename(filename))
    docs = codec.decode(raw)
    for doc in docs:
        hydrate_map(resolver, doc)
    return codec.encode(docs)


def _hydrate_entry(resolver: SecretResolver, key: str, value: str,
                   encoded: bool) -> str | None:
    """Return the new field value, or None when the entry holds no reference."""
    try:
        raw = _decode_field(value, encoded)
    except binascii.Error as exc:
        raise EncodingError(f"failed to base64-decode {key!r}: {exc}") from exc

    if is_structured(key):
        return _encode_field(hydrate_file(resolver, key, raw), encoded)

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None  # binary payload, can't hold a reference
    secret = hydrate_value(resolver, key, text)
    if secret is None:
        return None
    return _encode_field(secret.encode("utf-8"), encoded)


def hydrate_k8s_object(resolver: SecretResolver, data: dict) -> dict:
    """Hydrate a ConfigMap or Secret manifest in place and return it.

    A document without ``kind`` isn't a manifest and is hydrated as a plain
    document. New values are staged and written back only once every field
    group hydrated, so a failing manifest is left as it was.
    """
    kind = data.get("kind")
    if not isinstance(kind, str) or not kind:
        return hydrate_map(resolver, data)
    if kind not in FIELD_GROUPS:
        raise UnsupportedKindError(
            f"hydrate: k8s object is of kind={kind!r} "
            f"(supported: {', '.join(sorted(FIELD_GROUPS))})"
        )

    full = _full_name(kind, data)
    staged: list[tuple[dict, str, str]] = []
    for group, encoded in FIELD_GROUPS[kind]:
        fields = data.get(group)
        if not isinstance(fields, dict):
            continue
        for key, value in fields.items():
            if not isinstance(value, str):
                resolver.warnings.append(
                    f"hydrate: k8s {full}: failed to decode {key} (kind {type(value).__name__})"
                )
                continue
            what = (f"{format_from_filename(key).upper()} file" if is_structured(key)
                    else "value")
            print(f"hydrate: k8s {full}: {key} ({group} {what}, base64-encoded: {encoded})",
                  file=sys.stderr)
            try:
                new_value = _hydrate_entry(resolver, str(key), value, encoded)
            except HydrateError as exc:
                raise exc.wrap(f"hydrate: k8s {full}: failed to hydrate {group}.{key}")
            if new_value is not None:
                staged.append((fields, key, new_value))

    for fields, key, new_value in staged:
        fields[key] = new_value
    return data
