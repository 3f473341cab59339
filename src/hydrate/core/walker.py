"""Recursive hydration of a plain (non-manifest) document."""

import sys

from hydrate.core.reference import hydrate_value
from hydrate.core.resolver import SecretResolver
from hydrate.pacts.errors import HydrateError


def hydrate_map(resolver: SecretResolver, data: dict, path: list[str] | None = None) -> dict:
    """Replace secret references in ``data`` in place and return it.

    Nested maps are walked; lists and non-string scalars are left alone, so a
    reference inside a list item is not hydrated. The first failure aborts the
    walk with the dotted field path prepended to the message.
    """
    path = path or []
    for key, value in data.items():
        field = str(key)
        if isinstance(value, str):
            try:
                secret = hydrate_value(resolver, field, value)
            except HydrateError as exc:
                raise exc.wrap(f"failed to hydrate {'.'.join(path + [field])!r} field")
            if secret is not None:
                if resolver.config.debug:
                    print(f"\thydrated {'.'.join(path + [field])!r}", file=sys.stderr)
                data[key] = secret
        elif isinstance(value, dict):
            hydrate_map(resolver, value, path + [field])
    return data
