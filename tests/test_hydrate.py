"""Tests for the engine entry points."""

import copy
import json

import pytest
import yaml

from conftest import b64, unb64
from hydrate.core.hydrate import hydrate_document, hydrate_stream
from hydrate.pacts.errors import FormatError, ResolutionError, UnsupportedKindError
from hydrate.pacts.types import Mode


class TestHydrateDocument:
    """Tests for hydrate_document()."""

    def test_plain_mode(self, resolver):
        doc = {"db_pwd": "$$"}
        assert hydrate_document(resolver, doc) is doc
        assert doc == {"db_pwd": "ccc"}

    def test_plain_mode_ignores_kind(self, resolver):
        doc = {"kind": "Job", "db_pwd": "$$"}
        hydrate_document(resolver, doc, Mode.PLAIN)
        assert doc["db_pwd"] == "ccc"

    def test_kubernetes_mode(self, resolver):
        doc = {"kind": "Secret", "data": {"db.json": b64('{"pwd":"$SECRET"}')}}
        hydrate_document(resolver, doc, Mode.KUBERNETES)
        assert doc == {"kind": "Secret", "data": {"db.json": b64('{"pwd":"x"}')}}

    def test_kubernetes_mode_without_kind_matches_plain(self, resolver):
        doc = {"a": {"db_pwd": "$SECRET"}, "b": "$SECRET:/custom/parameter/path"}
        other = copy.deepcopy(doc)
        hydrate_document(resolver, doc, Mode.KUBERNETES)
        hydrate_document(resolver, other, Mode.PLAIN)
        assert doc == other


class TestHydrateStream:
    """Tests for hydrate_stream()."""

    def test_json(self, resolver):
        out = hydrate_stream(resolver, b'{"db_passwd": "$$", "n": 1}', "json")
        assert json.loads(out) == {"db_passwd": "bb", "n": 1}

    def test_toml(self, resolver):
        out = hydrate_stream(resolver, b'[db]\ndb_pwd = "$SECRET"\n', "toml")
        assert out == b'[db]\ndb_pwd = "ccc"\n'

    def test_yaml_multi_document(self, resolver, store):
        raw = (b"kind: Secret\nmetadata:\n  name: one\nstringData:\n  pwd: $$\n"
               b"---\nkind: ConfigMap\nmetadata:\n  name: two\ndata:\n  pwd: $SECRET\n")
        out = hydrate_stream(resolver, raw, "yaml", Mode.KUBERNETES)
        docs = list(yaml.safe_load_all(out))
        assert [d["metadata"]["name"] for d in docs] == ["one", "two"]
        assert docs[0]["stringData"]["pwd"] == "x"
        assert docs[1]["data"]["pwd"] == "x"
        assert store.calls["/prefix/pwd"] == 1

    def test_yaml_k8s_secret_data(self, resolver):
        raw = f"kind: Secret\nmetadata:\n  name: app\ndata:\n  db_pwd: {b64('$$')}\n".encode()
        out = yaml.safe_load(hydrate_stream(resolver, raw, "yml", Mode.KUBERNETES))
        assert unb64(out["data"]["db_pwd"]) == "ccc"

    def test_error_in_later_document_fails_stream(self, resolver):
        raw = b"a: $SECRET:/prefix/pwd\n---\nb: $SECRET:/nope\n"
        with pytest.raises(ResolutionError):
            hydrate_stream(resolver, raw, "yaml")

    def test_unsupported_kind_in_stream(self, resolver):
        with pytest.raises(UnsupportedKindError):
            hydrate_stream(resolver, b"kind: Deployment\n", "yaml", Mode.KUBERNETES)

    def test_unknown_format(self, resolver):
        with pytest.raises(FormatError):
            hydrate_stream(resolver, b"", "ini")
