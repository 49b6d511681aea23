from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class ImporterConfig:
    text_encoding: str = Defaults.TEXT_ENCODING
    binary_encoding: str | None = None
    strict_numbers: bool = Defaults.STRICT_NUMBERS
    field_types: tuple[str, ...] = ()
    preview_rows: int = Defaults.PREVIEW_ROWS

    def __post_init__(self) -> None:
        if not self.text_encoding:
            raise ValueError("text_encoding must not be empty")
        if self.preview_rows < 0:
            raise ValueError(
                f"preview_rows must be zero or positive, got {self.preview_rows}"
            )

    @classmethod
    def from_env(cls) -> "ImporterConfig":
        raw_binary_encoding = os.getenv("TABLE_IMPORTER_BINARY_ENCODING")
        binary_encoding = raw_binary_encoding.strip() if raw_binary_encoding else None
        return cls(
            text_encoding=os.getenv(
                "TABLE_IMPORTER_TEXT_ENCODING", Defaults.TEXT_ENCODING
            ),
            binary_encoding=binary_encoding or None,
            strict_numbers=_coerce_bool(
                os.getenv("TABLE_IMPORTER_STRICT_NUMBERS", "false"),
                key="TABLE_IMPORTER_STRICT_NUMBERS",
            ),
            preview_rows=int(
                os.getenv("TABLE_IMPORTER_PREVIEW_ROWS", str(Defaults.PREVIEW_ROWS))
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ImporterConfig:
        config = ImporterConfig.from_env()
        if config_file is None:
            config_file = Path("table_importer.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ImporterConfig
    ) -> ImporterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        import_section = _get_table(data, "import")
        cli_section = _get_table(data, "cli")
        text_encoding = base_config.text_encoding
        if value := import_section.get("text_encoding"):
            text_encoding = str(value)
        binary_encoding = base_config.binary_encoding
        if "binary_encoding" in import_section:
            raw = import_section.get("binary_encoding")
            cleaned = str(raw).strip() if raw is not None else ""
            binary_encoding = cleaned or None
        strict_numbers = base_config.strict_numbers
        if (value := import_section.get("strict_numbers")) is not None:
            strict_numbers = _coerce_bool(value, key="import.strict_numbers")
        field_types = base_config.field_types
        if (value := import_section.get("field_types")) is not None:
            field_types = _coerce_str_tuple(value, key="import.field_types")
        preview_rows = base_config.preview_rows
        if (value := cli_section.get("preview_rows")) is not None:
            preview_rows = _coerce_int(value, key="cli.preview_rows")
        return ImporterConfig(
            text_encoding=text_encoding,
            binary_encoding=binary_encoding,
            strict_numbers=strict_numbers,
            field_types=field_types,
            preview_rows=preview_rows,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_str_tuple(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, list):
        return tuple(str(item) for item in cast("list[object]", value))
    raise ValueError(
        f"{key} must be a list or comma-separated string, got {type(value).__name__}"
    )
