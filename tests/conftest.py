"""Shared fixtures: an in-memory, call-counting parameter store."""

import base64
from collections import Counter

import pytest

from hydrate.core.resolver import SecretResolver
from hydrate.pacts.errors import AccessDeniedError, ParameterNotFoundError
from hydrate.pacts.provider import SecretProvider
from hydrate.pacts.types import HydrateConfig


class FakeParameterStore(SecretProvider):
    """Dict-backed provider that records every lookup."""
    name = "fake store"

    def __init__(self, values: dict[str, str], denied: tuple[str, ...] = ()):
        self.values = dict(values)
        self.denied = denied
        self.calls: Counter = Counter()

    def get_parameter(self, path):
        self.calls[path] += 1
        if path in self.denied:
            raise AccessDeniedError(f"access denied to parameter {path!r}")
        if path not in self.values:
            raise ParameterNotFoundError(f"parameter {path!r} not found")
        return self.values[path]


PARAMETERS = {
    "/custom/parameter/path": "a",
    "/prefix/db_passwd": "bb",
    "/prefix/db_pwd": "ccc",
    "/prefix/pwd": "x",
    "/prefix/api/token": "tok",
    "/other/key": "other",
}


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def unb64(value: str) -> str:
    return base64.b64decode(value).decode("utf-8")


@pytest.fixture
def store():
    return FakeParameterStore(PARAMETERS, denied=("/prefix/forbidden",))


@pytest.fixture
def resolver(store):
    return SecretResolver(store, HydrateConfig(base_path="/prefix"))


@pytest.fixture
def bare_resolver(store):
    """Resolver without a base path."""
    return SecretResolver(store)
