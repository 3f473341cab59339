"""hydrate: fill secret placeholders in JSON/YAML/TOML files from a parameter store."""

import argparse
import os
import sys

import yaml

from hydrate.core.codecs import format_from_filename
from hydrate.core.hydrate import hydrate_stream
from hydrate.core.resolver import SecretResolver
from hydrate.pacts.errors import HydrateError
from hydrate.pacts.provider import SecretProvider
from hydrate.pacts.types import HydrateConfig, Mode
from hydrate.providers import PROVIDERS

EPILOG = """\
Replace all matching values with secrets from the parameter store:
    1. "$SECRET:/custom/parameter/path"
    2. "$$"       (parameter named after the key, under --path)
    3. "$SECRET"  (same as "$$")

examples:
    # Hydrate a JSON file
    hydrate --path=/prefix input.json > output.json

    # Hydrate YAML data from stdin
    echo 'data: $SECRET:/app/sit1/app_secret_data_key' | hydrate --format=yml - > secret.yml

    # Hydrate Kubernetes Secret/ConfigMap data values and files
    # (base64 encoding of "data"/"binaryData" handled automatically)
    hydrate --k8s k8s-secret.yml | kubectl apply -f -
"""


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(path: str | None) -> dict:
    """Load a hydrate YAML config file or return empty config."""
    if path:
        with open(path) as f:
            try:
                cfg = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise HydrateError(f"failed to load config file {path!r}: {exc}") from exc
        if not isinstance(cfg, dict):
            raise HydrateError(f"config file {path!r} must be a mapping")
    else:
        cfg = {}
    cfg.setdefault("provider", "ssm")
    cfg.setdefault("region", "")
    cfg.setdefault("path", "")
    cfg.setdefault("format", "")
    cfg.setdefault("k8s", False)
    cfg.setdefault("debug", False)
    return cfg


def resolve_settings(args: argparse.Namespace, config: dict,
                     environ: dict | None = None) -> dict:
    """Merge CLI flags over config file values over the environment."""
    environ = os.environ if environ is None else environ
    settings = {
        "provider": args.provider or config["provider"],
        "region": args.region or config["region"] or environ.get("AWS_DEFAULT_REGION", ""),
        "path": args.path or config["path"],
        "format": args.format or config["format"],
        "k8s": args.k8s or bool(config["k8s"]),
        "debug": args.debug or bool(config["debug"]),
    }
    if not settings["format"]:
        if args.filename == "-":
            raise HydrateError("--format=[json|yaml|toml] must be provided when using STDIN")
        settings["format"] = format_from_filename(args.filename)
    return settings


def build_provider(settings: dict) -> SecretProvider:
    provider_cls = PROVIDERS.get(settings["provider"])
    if provider_cls is None:
        raise HydrateError(
            f"unknown provider {settings['provider']!r} (supported: {', '.join(sorted(PROVIDERS))})"
        )
    if not settings["region"]:
        raise HydrateError("--region=[us-west-2] or $AWS_DEFAULT_REGION must be provided")
    return provider_cls(region=settings["region"])


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

def read_input(filename: str) -> bytes:
    if filename == "-":
        return sys.stdin.buffer.read()
    with open(filename, "rb") as f:
        return f.read()


def emit_warnings(warnings: list[str]) -> None:
    """Print all warnings to stderr."""
    for w in warnings:
        print(f"⚠ {w}", file=sys.stderr)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hydrate",
        description="Hydrate JSON, YAML and TOML config files with secrets from AWS SSM Parameter Store",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("filename", help="Input file, or - to read from stdin")
    parser.add_argument("--config", help="YAML file with default settings")
    parser.add_argument("--provider", help="Secret backend (default: ssm)")
    parser.add_argument("--region", help="AWS region (defaults to $AWS_DEFAULT_REGION)")
    parser.add_argument("--path", help="Base path for relative parameter keys, e.g. /app/sit1")
    parser.add_argument("--format", help="Input format: json, yaml, toml (default: file extension)")
    parser.add_argument(
        "--k8s", action="store_true", default=False,
        help="Hydrate Kubernetes Secret/ConfigMap objects' data fields and files",
    )
    parser.add_argument("--debug", action="store_true", default=False,
                        help="Print debug info to stderr")
    return parser


def run(args: argparse.Namespace, provider: SecretProvider | None = None,
        stdout=None) -> int:
    """Hydrate the input and write it to stdout. Returns the exit code."""
    if stdout is None:
        stdout = sys.stdout.buffer
    warnings: list[str] = []
    try:
        settings = resolve_settings(args, load_config(args.config))
        if provider is None:
            provider = build_provider(settings)
        resolver = SecretResolver(
            provider,
            HydrateConfig(base_path=settings["path"], debug=settings["debug"]),
            warnings=warnings,
        )
        mode = Mode.KUBERNETES if settings["k8s"] else Mode.PLAIN
        output = hydrate_stream(resolver, read_input(args.filename), settings["format"], mode)
        if output and not output.endswith(b"\n"):
            output += b"\n"
    except (HydrateError, OSError) as exc:
        emit_warnings(warnings)
        print(f"hydrate: {exc}", file=sys.stderr)
        return 1

    emit_warnings(warnings)
    stdout.write(output)
    stdout.flush()
    return 0


def main(argv: list[str] | None = None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
