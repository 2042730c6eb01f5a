# config.py
# SPDX-License-Identifier: MIT
"""Configuration models for license scans.

Declarative dataclasses for directory scanning and logging, plus helpers for
serializing them and loading them from JSON or TOML.
"""
from __future__ import annotations

import codecs
import json
try:  # pragma: no cover - optional dependency
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    try:
        import tomli as tomllib  # type: ignore[assignment]
    except Exception:  # pragma: no cover
        tomllib = None  # type: ignore[assignment]
from collections.abc import Sequence as ABCSequence
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .log import DEFAULT_LOG_FORMAT, PACKAGE_LOGGER_NAME, configure_logging

__all__ = [
    "DEFAULT_LICENSE_FILES",
    "ScanConfig",
    "LoggingConfig",
    "LicenseTypeConfig",
    "load_config_from_path",
]

# Reasonable license file names; case does not matter and a trailing ``*``
# accepts any suffix.
DEFAULT_LICENSE_FILES: Tuple[str, ...] = ("license*", "licence*", "copying*", "unlicense")


@dataclass(slots=True)
class ScanConfig:
    """Options for reading and locating license files.

    Attributes:
        patterns (tuple[str, ...]): Case-insensitive file name patterns
            used to pick candidate license files in a directory.
        encoding (str): Codec used to decode license bytes.
        errors (str): Codec error handler passed to ``bytes.decode``.
        max_bytes (int | None): Read at most this many bytes per file.
            None reads whole files.
        strict (bool): When True, single-result directory lookups raise
            ``MultipleLicensesFound`` instead of returning the first hit.
    """
    patterns: Tuple[str, ...] = DEFAULT_LICENSE_FILES
    encoding: str = "utf-8-sig"
    errors: str = "replace"
    max_bytes: Optional[int] = None
    strict: bool = False

    def validate(self) -> None:
        if not self.patterns:
            raise ValueError("scan.patterns must contain at least one pattern.")
        for pattern in self.patterns:
            if not isinstance(pattern, str) or not pattern.strip("*"):
                raise ValueError(f"scan.patterns entries must be non-empty names; got {pattern!r}.")
        if self.max_bytes is not None and self.max_bytes <= 0:
            raise ValueError(f"scan.max_bytes must be positive when set; got {self.max_bytes!r}.")
        try:
            codecs.lookup(self.encoding)
            codecs.lookup_error(self.errors)
        except LookupError as exc:
            raise ValueError(f"scan.encoding/scan.errors not usable: {exc}") from exc

    def decode(self, data: bytes) -> str:
        """Decode raw license bytes with the configured codec."""
        return data.decode(self.encoding, errors=self.errors)


@dataclass(slots=True)
class LoggingConfig:
    """Controls the package logger; set propagate/logger_name to
    integrate with host apps.
    """
    level: Union[int, str] = "WARNING"
    propagate: bool = False
    fmt: Optional[str] = DEFAULT_LOG_FORMAT
    logger_name: str = PACKAGE_LOGGER_NAME

    def apply(self) -> None:
        """Apply this logging configuration to the package logger."""
        configure_logging(
            level=self.level,
            propagate=self.propagate,
            fmt=self.fmt,
            logger_name=self.logger_name or PACKAGE_LOGGER_NAME,
        )


T = TypeVar("T")


@dataclass(slots=True)
class LicenseTypeConfig:
    """Top-level configuration.

    TOML and JSON documents mirror this layout with ``[scan]`` and
    ``[logging]`` tables.
    """
    scan: ScanConfig = field(default_factory=ScanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        self.scan.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of this configuration."""
        return _dataclass_to_dict(self)

    def to_json(self, path: Path | str, *, indent: int = 2) -> str:
        """Write the configuration to ``path`` as JSON and return the path."""
        target = Path(path)
        target.write_text(json.dumps(self.to_dict(), indent=indent, sort_keys=True), encoding="utf-8")
        return str(target)

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any]) -> T:
        return _dataclass_from_dict(cls, data)

    @classmethod
    def from_json(cls: Type[T], path: Path | str) -> T:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(payload, Mapping):
            raise TypeError(f"Top-level JSON document must be an object; got {type(payload).__name__}.")
        return cls.from_dict(payload)

    @classmethod
    def from_toml(cls: Type[T], path: Path | str) -> T:
        if tomllib is None:
            raise RuntimeError(
                "TOML support requires Python 3.11+ (tomllib) or installing the 'tomli' package."
            )
        data = tomllib.loads(Path(path).read_bytes().decode("utf-8"))
        if not isinstance(data, Mapping):
            raise TypeError(f"Top-level TOML document must be a mapping; got {type(data).__name__}.")
        return cls.from_dict(data)


def load_config_from_path(path: str | Path) -> LicenseTypeConfig:
    """Load a LicenseTypeConfig from a ``.toml`` or ``.json`` file.

    Raises:
        ValueError: If the extension is neither ``.toml`` nor ``.json``, or
            the loaded values fail validation.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".toml":
        cfg = LicenseTypeConfig.from_toml(p)
    elif suffix == ".json":
        cfg = LicenseTypeConfig.from_json(p)
    else:
        raise ValueError(f"Unsupported config extension {p.suffix!r}; expected .toml or .json.")
    cfg.validate()
    return cfg


def _dataclass_to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize dataclasses to JSON-friendly dicts, skipping None fields."""
    result: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        serialized = _serialize_value(value)
        if serialized is not None:
            result[f.name] = serialized
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _serialize_value(v) for k, v in value.items() if v is not None}
    if is_dataclass(value):
        return _dataclass_to_dict(value)
    return None


def _dataclass_from_dict(cls: Type[T], data: Mapping[str, Any] | None, *, table: str | None = None) -> T:
    """Instantiate dataclass ``cls`` from a mapping, ignoring unknown keys."""
    if data is None:
        return cls()  # type: ignore[call-arg]
    if not isinstance(data, Mapping):
        raise TypeError(f"[{table or cls.__name__}] must be a table; got {type(data).__name__}.")
    type_hints = get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _coerce_value(type_hints.get(f.name, f.type), data[f.name], name=_join(table, f.name))
    return cls(**kwargs)  # type: ignore[arg-type]


def _coerce_value(expected_type: Any, value: Any, *, name: str | None = None) -> Any:
    """Coerce ``value`` into the shape implied by ``expected_type``."""
    base_type = _strip_optional(expected_type)
    if value is None:
        return None
    if isinstance(base_type, type) and is_dataclass(base_type):
        return _dataclass_from_dict(base_type, value, table=name)
    origin = get_origin(base_type)
    if origin in (list, tuple, ABCSequence):
        if isinstance(value, str):
            value = [value]
        args = [arg for arg in get_args(base_type) if arg is not Ellipsis]
        inner = args[0] if args else Any
        items = [_coerce_value(inner, v) for v in value]
        return tuple(items) if origin is tuple else list(items)
    if base_type is Path:
        return Path(value)
    if base_type in {str, int, float, bool}:
        return base_type(value)
    return value


def _strip_optional(typ: Any) -> Any:
    """Drop ``None`` from an Optional annotation."""
    if get_origin(typ) is Union:
        args = [arg for arg in get_args(typ) if arg is not type(None)]
        if len(args) == 1:
            return _strip_optional(args[0])
    return typ


def _join(table: str | None, key: str) -> str:
    return f"{table}.{key}" if table else key
