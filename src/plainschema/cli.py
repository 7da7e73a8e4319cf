"""Validate JSON or YAML documents on disk against a schema object."""

from __future__ import annotations

import argparse
import importlib
import importlib.util
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

import yaml

from .config import CliConfig, ConfigError, parse_log_level
from .errors import ValidationError
from .model import SCHEMA_TYPES, Schema
from .validator import validate

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class DocumentLoadError(ValueError):
    """Raised when a schema reference or document cannot be loaded."""


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="plainschema", description=__doc__)
    parser.add_argument(
        "schema",
        help="Schema reference as 'package.module:NAME' or 'path/to/schemas.py:NAME'",
    )
    parser.add_argument("documents", nargs="+", help="JSON or YAML documents to validate")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override PLAINSCHEMA_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def load_schema(reference: str) -> Schema:
    """Resolve ``module:NAME`` or ``file.py:NAME`` to a schema object."""
    target, sep, attribute = reference.rpartition(":")
    if not sep or not target or not attribute:
        raise DocumentLoadError(f"schema reference must look like 'module:NAME', got {reference!r}")

    if target.endswith(".py"):
        module = _load_module_from_path(Path(target))
    else:
        try:
            module = importlib.import_module(target)
        except ImportError as exc:
            raise DocumentLoadError(f"cannot import schema module {target!r}: {exc}") from exc
        except Exception as exc:
            raise DocumentLoadError(f"schema module {target!r} failed to load: {exc!r}") from exc

    try:
        schema = getattr(module, attribute)
    except AttributeError as exc:
        raise DocumentLoadError(f"{target!r} has no attribute {attribute!r}") from exc

    if not isinstance(schema, SCHEMA_TYPES):
        raise DocumentLoadError(
            f"{reference!r} is a {type(schema).__name__}, not a schema"
        )
    logger.debug("Resolved schema %s to %s", reference, type(schema).__name__)
    return schema


def _load_module_from_path(path: Path) -> Any:
    resolved = path.resolve()
    if not resolved.is_file():
        raise DocumentLoadError(f"schema file not found: {path}")

    spec = importlib.util.spec_from_file_location(f"_plainschema_ref_{resolved.stem}", resolved)
    if spec is None or spec.loader is None:
        raise DocumentLoadError(f"cannot load schema file: {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise DocumentLoadError(f"schema file {path} failed to load: {exc!r}") from exc
    return module


def load_document(path: Path, *, yaml_suffixes: Sequence[str]) -> Any:
    """Parse a document as YAML or JSON depending on its suffix."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"cannot read {path}: {exc}") from exc

    if path.suffix.lower() in yaml_suffixes:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"invalid YAML in {path}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"invalid JSON in {path}: {exc}") from exc


def run(schema: Schema, documents: Sequence[Path], config: CliConfig) -> int:
    """Validate each document in order, stopping at the first one that fails."""
    for path in documents:
        document = load_document(path, yaml_suffixes=config.yaml_suffixes)
        try:
            validate(schema, document)
        except ValidationError as exc:
            logger.info("Validation failed for %s at %s", path, exc.location)
            print(f"FAIL {path}", file=sys.stderr)
            print(str(exc).lstrip("\n"), file=sys.stderr)
            return EXIT_INVALID
        logger.info("Validated %s", path)
        print(f"PASS {path}")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = CliConfig.from_env()
        if args.log_level is not None:
            config = CliConfig(
                log_level=parse_log_level(args.log_level),
                yaml_suffixes=config.yaml_suffixes,
            )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(level=config.log_level, format="%(name)s - %(levelname)s - %(message)s")

    try:
        schema = load_schema(args.schema)
        return run(schema, [Path(name) for name in args.documents], config)
    except DocumentLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
