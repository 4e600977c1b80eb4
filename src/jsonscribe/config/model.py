# topmark:header:start
#
#   project      : JsonScribe
#   file         : model.py
#   file_relpath : src/jsonscribe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer settings model and merge policy.

This module defines:
    - `WriterSettings`: an immutable snapshot held by a `JsonWriter`.
    - `MutableWriterSettings`: a mutable builder used while layering defaults,
      TOML files and explicit overrides; it can be frozen into `WriterSettings`
      and thawed back for edits.

Immutability:
    - `WriterSettings` is ``frozen=True``; each writer owns its own snapshot, so
      several writers with different settings never interfere.
    - Use `WriterSettings.thaw` -> edit -> `MutableWriterSettings.freeze` (or
      `WriterSettings.replace`) for updates.

TOML layout:
    ```toml
    [writer]
    pretty_print = true
    indent_width = 2
    indent_string = " "
    validate = true
    ```

    In ``pyproject.toml`` the same table lives under ``[tool.jsonscribe.writer]``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jsonscribe.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from jsonscribe.config.keys import Toml
from jsonscribe.config.logging import get_logger
from jsonscribe.constants import (
    DEFAULT_INDENT_STRING,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_PRETTY_PRINT,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_VALIDATE,
    PYPROJECT_TOML_NAME,
)
from jsonscribe.core.errors import SettingsError

if TYPE_CHECKING:
    from jsonscribe.config.io import TomlTable
    from jsonscribe.config.logging import JsonScribeLogger

logger: JsonScribeLogger = get_logger(__name__)


def _check_indent_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, int):
        raise SettingsError(f"indent_width must be an integer, got {width!r}")
    if width < 0:
        raise SettingsError(f"indent_width must not be negative, got {width}")
    return width


# ------------------ Immutable runtime settings ------------------


@dataclass(frozen=True, slots=True)
class WriterSettings:
    """Immutable formatting and validation settings of a `JsonWriter`.

    Attributes:
        pretty_print (bool): Emit newlines, indentation and aligned property names.
        indent_width (int): Indent string repetitions per nesting level.
        indent_string (str): Text repeated to build indentation.
        validate (bool): Reject calls that break JSON grammar. When False, the
            writer trusts the caller and may produce invalid JSON.

    Raises:
        SettingsError: If ``indent_width`` is negative or not an integer, or
            ``indent_string`` is not a string.
    """

    pretty_print: bool = DEFAULT_PRETTY_PRINT
    indent_width: int = DEFAULT_INDENT_WIDTH
    indent_string: str = DEFAULT_INDENT_STRING
    validate: bool = DEFAULT_VALIDATE

    def __post_init__(self) -> None:
        _check_indent_width(self.indent_width)
        if not isinstance(self.indent_string, str):
            raise SettingsError(f"indent_string must be a string, got {self.indent_string!r}")

    def replace(self, **changes: Any) -> WriterSettings:
        """Return a copy with ``changes`` applied (validated like the constructor)."""
        return dataclasses.replace(self, **changes)

    def to_toml_dict(self) -> TomlTable:
        """Convert these settings into a TOML-serializable dict.

        Returns:
            TomlTable: A mapping with a single ``[writer]`` table.
        """
        return {
            Toml.SECTION_WRITER: {
                Toml.KEY_PRETTY_PRINT: self.pretty_print,
                Toml.KEY_INDENT_WIDTH: self.indent_width,
                Toml.KEY_INDENT_STRING: self.indent_string,
                Toml.KEY_VALIDATE: self.validate,
            },
        }

    def thaw(self) -> MutableWriterSettings:
        """Return a mutable copy of these settings.

        Returns:
            MutableWriterSettings: A builder initialized from this snapshot.
        """
        return MutableWriterSettings(
            pretty_print=self.pretty_print,
            indent_width=self.indent_width,
            indent_string=self.indent_string,
            validate=self.validate,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableWriterSettings:
    """Mutable writer settings used while layering configuration sources.

    ``None`` means *unset*: the field inherits from a lower layer, and falls
    back to the runtime default on `freeze`.
    """

    pretty_print: bool | None = None
    indent_width: int | None = None
    indent_string: str | None = None
    validate: bool | None = None

    def freeze(self) -> WriterSettings:
        """Freeze this builder into immutable `WriterSettings`.

        Returns:
            WriterSettings: The validated snapshot; unset fields take their defaults.

        Raises:
            SettingsError: If a field holds an invalid value.
        """
        return WriterSettings(
            pretty_print=(
                DEFAULT_PRETTY_PRINT if self.pretty_print is None else self.pretty_print
            ),
            indent_width=(
                DEFAULT_INDENT_WIDTH if self.indent_width is None else self.indent_width
            ),
            indent_string=(
                DEFAULT_INDENT_STRING if self.indent_string is None else self.indent_string
            ),
            validate=DEFAULT_VALIDATE if self.validate is None else self.validate,
        )

    def merge_with(self, other: MutableWriterSettings) -> MutableWriterSettings:
        """Return a new builder where fields set in ``other`` override this one.

        Args:
            other (MutableWriterSettings): The higher-precedence layer.

        Returns:
            MutableWriterSettings: The merged builder.
        """
        return MutableWriterSettings(
            pretty_print=(
                other.pretty_print if other.pretty_print is not None else self.pretty_print
            ),
            indent_width=(
                other.indent_width if other.indent_width is not None else self.indent_width
            ),
            indent_string=(
                other.indent_string if other.indent_string is not None else self.indent_string
            ),
            validate=other.validate if other.validate is not None else self.validate,
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableWriterSettings:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, toml_dict: TomlTable) -> MutableWriterSettings:
        """Parse the ``[writer]`` table of a TOML mapping.

        Keys that are missing or hold a value of the wrong type stay unset.

        Args:
            toml_dict (TomlTable): A parsed TOML document (``jsonscribe.toml`` layout).

        Returns:
            MutableWriterSettings: The parsed builder.
        """
        writer_tbl: TomlTable = get_table_value(toml_dict, Toml.SECTION_WRITER)
        return cls(
            pretty_print=get_bool_value_or_none(writer_tbl, Toml.KEY_PRETTY_PRINT),
            indent_width=get_int_value_or_none(writer_tbl, Toml.KEY_INDENT_WIDTH),
            indent_string=get_string_value_or_none(writer_tbl, Toml.KEY_INDENT_STRING),
            validate=get_bool_value_or_none(writer_tbl, Toml.KEY_VALIDATE),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableWriterSettings | None:
        """Load settings from a single TOML file.

        Supports both ``jsonscribe.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.jsonscribe]`` section is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableWriterSettings | None: The parsed builder, or None when a
                ``pyproject.toml`` has no ``[tool.jsonscribe]`` section.
        """
        logger.debug("Creating MutableWriterSettings from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable = get_table_value(toml_data, Toml.SECTION_TOOL)
            toml_data = get_table_value(tool_tbl, Toml.SECTION_JSONSCRIBE)
            if not toml_data:
                logger.debug("[tool.jsonscribe] section missing or malformed in %s", path)
                return None

        draft: MutableWriterSettings = cls.from_toml_dict(toml_data)
        logger.debug("Generated MutableWriterSettings: %s", draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        start: Path | None = None,
        *,
        overrides: MutableWriterSettings | None = None,
    ) -> MutableWriterSettings:
        """Layer defaults, project config files and explicit overrides.

        Precedence (lowest to highest):
          1. runtime defaults,
          2. ``pyproject.toml`` (``[tool.jsonscribe]``) in ``start``,
          3. ``jsonscribe.toml`` in ``start``,
          4. ``overrides``.

        Args:
            start (Path | None): Directory holding the config files; defaults to the CWD.
            overrides (MutableWriterSettings | None): Highest-precedence layer.

        Returns:
            MutableWriterSettings: The merged builder, ready to `freeze`.
        """
        base_dir: Path = Path.cwd() if start is None else start
        merged: MutableWriterSettings = cls.from_defaults()

        for name in (PYPROJECT_TOML_NAME, DEFAULT_TOML_CONFIG_NAME):
            candidate: Path = base_dir / name
            if not candidate.is_file():
                continue
            layer: MutableWriterSettings | None = cls.from_toml_file(candidate)
            if layer is None:
                continue
            logger.debug("Merging writer settings from %s", candidate)
            merged = merged.merge_with(layer)

        if overrides is not None:
            merged = merged.merge_with(overrides)
        return merged
