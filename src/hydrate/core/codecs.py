"""Format codecs: JSON, YAML (multi-document) and TOML."""

import json
import os
import tomllib
from abc import ABC, abstractmethod

import tomli_w
import yaml

from hydrate.pacts.errors import FormatError


class Codec(ABC):
    """Decode raw bytes to a list of documents and back."""
    name = "base"
    formats: tuple[str, ...] = ()

    @abstractmethod
    def decode(self, raw: bytes) -> list[dict]:
        """Return every document in ``raw``, in stream order."""

    @abstractmethod
    def encode(self, docs: list[dict]) -> bytes:
        """Serialize ``docs`` back to bytes."""

    def _check_mapping(self, doc) -> dict:
        if not isinstance(doc, dict):
            raise FormatError(
                f"failed to decode {self.name}: expected a mapping at document root, "
                f"got {type(doc).__name__}"
            )
        return doc

    def _single(self, docs: list[dict]) -> dict:
        if len(docs) != 1:
            raise FormatError(f"failed to encode {self.name}: expected 1 document, got {len(docs)}")
        return docs[0]


class JsonCodec(Codec):
    """Compact JSON (no whitespace, no trailing newline), non-ASCII kept."""
    name = "JSON"
    formats = ("json",)

    def decode(self, raw):
        try:
            doc = json.loads(raw)
        except ValueError as exc:
            raise FormatError(f"failed to decode JSON: {exc}") from exc
        return [self._check_mapping(doc)]

    def encode(self, docs):
        try:
            text = json.dumps(self._single(docs), ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise FormatError(f"failed to encode JSON: {exc}") from exc
        return text.encode("utf-8")


class YamlCodec(Codec):
    """YAML streams: every ``---`` document is kept, in order; empty ones are dropped."""
    name = "YAML"
    formats = ("yaml", "yml")

    def decode(self, raw):
        try:
            docs = list(yaml.safe_load_all(raw))
        except yaml.YAMLError as exc:
            raise FormatError(f"failed to decode YAML: {exc}") from exc
        return [self._check_mapping(doc) for doc in docs if doc is not None]

    def encode(self, docs):
        try:
            return yaml.safe_dump_all(docs, default_flow_style=False, sort_keys=False,
                                      allow_unicode=True, encoding="utf-8")
        except yaml.YAMLError as exc:
            raise FormatError(f"failed to encode YAML: {exc}") from exc


class TomlCodec(Codec):
    name = "TOML"
    formats = ("toml",)

    def decode(self, raw):
        try:
            doc = tomllib.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            raise FormatError(f"failed to decode TOML: {exc}") from exc
        return [doc]

    def encode(self, docs):
        try:
            return tomli_w.dumps(self._single(docs)).encode("utf-8")
        except (TypeError, ValueError) as exc:
            # TOML has no null
            raise FormatError(f"failed to encode TOML: {exc}") from exc


_CODECS = [JsonCodec(), YamlCodec(), TomlCodec()]

CODECS = {fmt: codec for codec in _CODECS for fmt in codec.formats}


def get_codec(fmt: str) -> Codec:
    """Return the codec for a format name (``json``, ``yaml``/``yml``, ``toml``)."""
    codec = CODECS.get((fmt or "").lower())
    if codec is None:
        raise FormatError(
            f"failed to hydrate: unknown file format {fmt!r} "
            f"(supported: {', '.join(sorted(CODECS))})"
        )
    return codec


def format_from_filename(filename: str) -> str:
    """File extension without the dot, lowercased (``db.YML`` -> ``yml``)."""
    return os.path.splitext(filename)[1].lstrip(".").lower()


def is_structured(filename: str) -> bool:
    return format_from_filename(filename) in CODECS
