# topmark:header:start
#
#   project      : DocVariant
#   file         : api.py
#   file_relpath : src/docvariant/api.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Public DocVariant API (stable surface).

Small, typed entry points for running DocVariant without the CLI.

Configuration contract
----------------------
- `render_file` and `build` accept either a frozen `docvariant.config.Config`
  or a plain mapping mirroring the CLI options (``tag``, ``source_dir``,
  ``output_dir``, ``doc_url``, ``dry_run``, ...) plus an optional ``brands``
  table shaped like the TOML one. Mappings are layered over the built-in
  defaults and frozen before use; config files are **not** discovered.
- Errors are raised as `docvariant.core.errors.DocvariantError` subclasses.

```python
from docvariant import api

text = api.render_text("Welcome to %brand%!\\n", tag="truenas")
result = api.build({"tag": "freenas", "source_dir": "docs"})
```
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docvariant.config import Config, MutableConfig
from docvariant.constants import DEFAULT_DOC_URL
from docvariant.directives.patterns import split_lines
from docvariant.pipeline import runner
from docvariant.pipeline.context import ProcessingContext
from docvariant.pipeline.engine import BuildResult, process_document, run_build
from docvariant.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from docvariant.directives.brands import Brand

__all__: list[str] = [
    "BuildResult",
    "build",
    "ensure_config",
    "render_file",
    "render_text",
]


def ensure_config(config: Config | Mapping[str, Any]) -> Config:
    """Return a frozen `Config` for ``config``.

    Raises:
        ConfigError: If the mapping lacks a tag or has invalid directories.
    """
    if isinstance(config, Config):
        return config
    draft = MutableConfig.from_defaults().apply_cli_args(config)
    if "brands" in config:
        draft = draft.merge_with(MutableConfig.from_toml_dict({"brands": config["brands"]}))
    return draft.freeze()


def render_text(
    text: str,
    *,
    tag: str,
    chapter_index: int = 0,
    source_dir: Path | None = None,
    doc_url: str = DEFAULT_DOC_URL,
    brands: tuple[Brand, ...] | None = None,
    path: Path | None = None,
) -> str:
    """Run includes, conditionals and substitutions on an in-memory document.

    Args:
        text (str): Document content.
        tag (str): Build tag.
        chapter_index (int): Value for ``%chapternum%``.
        source_dir (Path | None): Directory include paths are relative to (default: CWD).
        doc_url (str): Value for ``%docurl%``.
        brands (tuple[Brand, ...] | None): Brand table (default: built-in brands).
        path (Path | None): Nominal document path used in error messages.

    Returns:
        str: The rendered document.
    """
    draft = MutableConfig.from_defaults()
    draft.tag = tag
    draft.source_dir = source_dir
    draft.doc_url = doc_url
    if brands is not None:
        draft.brands = list(brands)
    config: Config = draft.freeze()

    ctx = ProcessingContext.bootstrap(
        path=path or config.source_dir / "<text>",
        config=config,
        chapter_index=chapter_index,
    )
    ctx.lines = split_lines(text)
    return runner.run(ctx, Pipeline.RESOLVE.steps, prune=False).text


def render_file(
    path: Path,
    config: Config | Mapping[str, Any],
    *,
    chapter_index: int = 0,
) -> str:
    """Render one document without writing it.

    Args:
        path (Path): Document path (relative paths are resolved against the source dir).
        config (Config | Mapping[str, Any]): Run configuration.
        chapter_index (int): Value for ``%chapternum%``.

    Returns:
        str: The rendered document.
    """
    cfg: Config = ensure_config(config)
    ctx = process_document(
        path, config=cfg, chapter_index=chapter_index, steps=Pipeline.RENDER.steps, prune=False
    )
    return ctx.text


def build(config: Config | Mapping[str, Any]) -> BuildResult:
    """Build the configured variant (see `docvariant.pipeline.engine.run_build`)."""
    return run_build(ensure_config(config))
