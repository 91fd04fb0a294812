# topmark:header:start
#
#   project      : DocVariant
#   file         : model.py
#   file_relpath : src/docvariant/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot threaded through every pipeline step.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Precedence (last wins):
    built-in defaults → discovered config file(s) → ``--config`` files → CLI options.

Path semantics:
    - Paths declared in a config file are normalized against that file's directory.
    - CLI paths are normalized against the invocation CWD.
    - When ``build_list`` / ``copy_list`` are unset they default to
      ``build-list.txt`` / ``copy-list.txt`` inside ``source_dir``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docvariant.config.io import (
    extract_tool_table,
    get_bool_value_or_none,
    get_string_list,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from docvariant.config.logging import get_logger
from docvariant.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BUILD_LIST_NAME,
    DEFAULT_COPY_LIST_NAME,
    DEFAULT_DOC_URL,
    DEFAULT_OUTPUT_DIR_NAME,
    PYPROJECT_FILE_NAME,
)
from docvariant.core.errors import ConfigError
from docvariant.directives.brands import DEFAULT_BRANDS, Brand

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docvariant.config.io import TomlTable
    from docvariant.config.logging import DocvariantLogger

# Generic mapping accepted by `MutableConfig.apply_cli_args` (CLI kwargs or API dicts).
ArgsLike = Mapping[str, Any]

logger: DocvariantLogger = get_logger(__name__)


def _abs_path(value: str | Path, base: Path) -> Path:
    p = Path(value).expanduser()
    return (p if p.is_absolute() else base / p).resolve()


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one DocVariant run.

    Attributes:
        tag (str): The build tag selecting the variant (e.g. ``"freenas"``).
        source_dir (Path): Root of the reST sources; include paths are relative to it.
        output_dir (Path): Root of the generated tree.
        build_list (Path | None): Explicit build-list file, or ``None`` for the default.
        copy_list (Path | None): Explicit copy-list file, or ``None`` for the default.
        doc_url (str): Value substituted for ``%docurl%``.
        brands (tuple[Brand, ...]): Known brands, searched in order.
        clean (bool): Remove ``output_dir`` before building.
        dry_run (bool): Render documents without writing anything.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    tag: str
    source_dir: Path
    output_dir: Path
    build_list: Path | None = None
    copy_list: Path | None = None
    doc_url: str = DEFAULT_DOC_URL
    brands: tuple[Brand, ...] = DEFAULT_BRANDS
    clean: bool = False
    dry_run: bool = False
    config_files: tuple[Path, ...] = ()

    @property
    def build_list_path(self) -> Path:
        """Effective build-list file."""
        return self.build_list or self.source_dir / DEFAULT_BUILD_LIST_NAME

    @property
    def copy_list_path(self) -> Path:
        """Effective copy-list file."""
        return self.copy_list or self.source_dir / DEFAULT_COPY_LIST_NAME

    @property
    def copy_list_required(self) -> bool:
        """Whether a missing copy-list is an error (only when set explicitly)."""
        return self.copy_list is not None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            tag=self.tag,
            source_dir=self.source_dir,
            output_dir=self.output_dir,
            build_list=self.build_list,
            copy_list=self.copy_list,
            doc_url=self.doc_url,
            brands=list(self.brands),
            clean=self.clean,
            dry_run=self.dry_run,
            config_files=list(self.config_files),
        )

    def with_tag(self, tag: str) -> Config:
        """Return a copy of this config building for another tag."""
        return replace(self, tag=tag)


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left as ``None`` mean "not set at this layer" and do not override
    earlier layers in `merge_with`.
    """

    tag: str | None = None
    source_dir: Path | None = None
    output_dir: Path | None = None
    build_list: Path | None = None
    copy_list: Path | None = None
    doc_url: str | None = None
    brands: list[Brand] | None = None
    clean: bool | None = None
    dry_run: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable `Config`.

        Raises:
            ConfigError: If no tag is set, or the output directory would contain
                the source directory.
        """
        if not self.tag:
            raise ConfigError("No build tag configured (use --tag or set 'tag' in the config).")

        source_dir: Path = (self.source_dir or Path.cwd()).resolve()
        output_dir: Path = (self.output_dir or source_dir / DEFAULT_OUTPUT_DIR_NAME).resolve()
        if output_dir == source_dir or source_dir.is_relative_to(output_dir):
            raise ConfigError(
                f"Output directory {output_dir} must not contain the source directory {source_dir}."
            )

        return Config(
            tag=self.tag,
            source_dir=source_dir,
            output_dir=output_dir,
            build_list=self.build_list,
            copy_list=self.copy_list,
            doc_url=self.doc_url if self.doc_url is not None else DEFAULT_DOC_URL,
            brands=tuple(self.brands) if self.brands is not None else DEFAULT_BRANDS,
            clean=bool(self.clean),
            dry_run=bool(self.dry_run),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder carrying only the built-in defaults."""
        return cls(doc_url=DEFAULT_DOC_URL, brands=list(DEFAULT_BRANDS), clean=False)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a config layer from a parsed TOML table.

        Args:
            data (TomlTable): The DocVariant table (top level of ``docvariant.toml``
                or ``[tool.docvariant]``).
            config_file (Path | None): Origin of ``data``; relative paths are resolved
                against its directory (or the CWD when ``None``).

        Returns:
            MutableConfig: The parsed layer.

        Raises:
            ConfigError: If a value has the wrong type or a brand has no name.
        """
        base: Path = config_file.parent if config_file is not None else Path.cwd()
        src: object = config_file or "config"

        def _path(key: str) -> Path | None:
            value = get_string_value_or_none(data, key, source=src)
            return _abs_path(value, base) if value is not None else None

        draft = cls(
            tag=get_string_value_or_none(data, "tag", source=src),
            source_dir=_path("source_dir"),
            output_dir=_path("output_dir"),
            build_list=_path("build_list"),
            copy_list=_path("copy_list"),
            doc_url=get_string_value_or_none(data, "doc_url", source=src),
            clean=get_bool_value_or_none(data, "clean", source=src),
        )

        brands_table: TomlTable = get_table_value(data, "brands", source=src)
        if brands_table:
            draft.brands = list(_parse_brands(brands_table, source=src))

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load one config file; ``None`` if a ``pyproject.toml`` has no DocVariant section."""
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(load_toml_dict(path), path)
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path.resolve())

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return the config files present in ``start``.

        ``pyproject.toml`` comes first so that ``docvariant.toml`` in the same
        directory wins the merge.
        """
        found: list[Path] = []
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate = start / name
            if candidate.is_file():
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        config_paths: Iterable[Path] = (),
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults, discovered config files and explicit config files.

        Args:
            config_paths (Iterable[Path]): Extra config files (``--config``), applied last.
            no_config (bool): Skip discovery in ``cwd``.
            cwd (Path | None): Directory to discover config files in (default: CWD).

        Returns:
            MutableConfig: The merged builder, ready for CLI overrides and `freeze`.

        Raises:
            ConfigError: If an explicit config file does not exist or is invalid.
        """
        merged: MutableConfig = cls.from_defaults()
        sources: list[Path] = [] if no_config else cls.discover_config_files(cwd or Path.cwd())

        for extra in config_paths:
            if not extra.is_file():
                raise ConfigError(f"Config file not found: {extra}")
            sources.append(extra)

        for path in sources:
            layer = cls.from_toml_file(path)
            if layer is not None:
                logger.info("Loaded config from %s", path)
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other``'s explicitly set fields on top of ours."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            tag=pick(self.tag, other.tag),
            source_dir=pick(self.source_dir, other.source_dir),
            output_dir=pick(self.output_dir, other.output_dir),
            build_list=pick(self.build_list, other.build_list),
            copy_list=pick(self.copy_list, other.copy_list),
            doc_url=pick(self.doc_url, other.doc_url),
            brands=pick(self.brands, other.brands),
            clean=pick(self.clean, other.clean),
            dry_run=pick(self.dry_run, other.dry_run),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place; ``None`` values leave the field untouched.

        Recognized keys: ``tag``, ``source_dir``, ``output_dir``, ``build_list``,
        ``copy_list``, ``doc_url``, ``clean``, ``dry_run``. Paths are resolved
        against the CWD.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        cwd = Path.cwd()
        for key in ("source_dir", "output_dir", "build_list", "copy_list"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, _abs_path(value, cwd))
        for key in ("tag", "doc_url"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, str(value))
        # Flags only override when switched on
        if args.get("clean"):
            self.clean = True
        if args.get("dry_run"):
            self.dry_run = True
        return self


def _parse_brands(table: TomlTable, *, source: object) -> Iterable[Brand]:
    for key, raw in table.items():
        if not isinstance(raw, dict):
            raise ConfigError(f"{source}: [brands.{key}] must be a table")
        brand_table: TomlTable = raw
        name = get_string_value_or_none(brand_table, "name", source=source)
        if not name:
            raise ConfigError(f"{source}: [brands.{key}] needs a 'name'")
        tags = get_string_list(brand_table, "tags", source=source) or [key]
        prefixes = get_string_list(brand_table, "prefixes", source=source)
        yield Brand(name=name, tags=tuple(tags), prefixes=tuple(prefixes))
