"""Template loading and rendering.

Templates are ``*.j2`` files. A generation run first builds a
:class:`TemplateStore` from the built-in directory and an optional custom
directory (custom files override built-ins with the same file name and may
add new ones), sets the global model, then freezes the store into a
:class:`TemplateRenderer`. Templates include each other by logical name::

    {% include "params" %}
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import jinja2

from .exceptions import ConfigError, GeneratorError, TemplateNotFoundError

TEMPLATE_SUFFIX = ".j2"
BUILTIN_TEMPLATE_DIR = Path(__file__).parent / "builtin_templates"


def template_base_name(file_name: str) -> Optional[str]:
    """Return the logical template name, or None for non-template files."""
    if not file_name.endswith(TEMPLATE_SUFFIX):
        return None
    return file_name[: -len(TEMPLATE_SUFFIX)]


def _list_files(directory: Optional[Path]) -> list[str]:
    if directory is None:
        return []
    try:
        return sorted(p.name for p in directory.iterdir() if p.is_file())
    except OSError as exc:
        raise ConfigError(f"Cannot read template directory {directory}: {exc}") from exc


class TemplateStore:
    """All templates of a generation run, keyed by logical name."""

    def __init__(self, builtin_dir: Path | str, custom_dir: Path | str | None = None) -> None:
        builtin = Path(builtin_dir)
        custom = Path(custom_dir) if custom_dir else None
        builtin_files = _list_files(builtin)
        custom_files = _list_files(custom)

        self._templates: dict[str, str] = {}
        self._globals: dict[str, Any] = {}
        self._frozen = False

        # Built-ins, taking an override into account
        for file_name in builtin_files:
            base_name = template_base_name(file_name)
            if base_name:
                directory = custom if file_name in custom_files else builtin
                self._templates[base_name] = (directory / file_name).read_text(encoding="utf-8")

        # Custom templates which are not built-in
        for file_name in custom_files:
            base_name = template_base_name(file_name)
            if base_name and base_name not in self._templates:
                self._templates[base_name] = (custom / file_name).read_text(encoding="utf-8")

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def names(self) -> list[str]:
        return list(self._templates)

    def source(self, name: str) -> str:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def set_globals(self, values: Mapping[str, Any]) -> None:
        """Add values to the model of every template, replacing same-named ones."""
        if self._frozen:
            raise GeneratorError("Globals cannot change once rendering has started")
        self._globals.update(values)

    def freeze(self) -> TemplateRenderer:
        """End the build phase and return a renderer over this store."""
        self._frozen = True
        return TemplateRenderer(self._templates, self._globals)


class TemplateRenderer:
    """Renders templates from a frozen template set and global model."""

    def __init__(self, templates: Mapping[str, str], globals: Mapping[str, Any]) -> None:
        self.templates = MappingProxyType(dict(templates))
        self.globals = MappingProxyType(dict(globals))
        self._env = jinja2.Environment(
            loader=jinja2.DictLoader(dict(self.templates)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def apply(self, template: str, model: Mapping[str, Any]) -> str:
        """Render *template* with the globals overlaid by *model*."""
        if template not in self.templates:
            raise TemplateNotFoundError(template)
        actual_model = {**self.globals, **model}
        try:
            return self._env.get_template(template).render(**actual_model)
        except jinja2.TemplateNotFound as exc:
            # an include naming an unregistered partial
            raise TemplateNotFoundError(exc.name) from exc

    def write(self, template: str, model: Mapping[str, Any], file: Path | str) -> None:
        """Render *template* and write the result to *file*, replacing it."""
        content = self.apply(template, model)
        output_path = Path(file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        print(f"Wrote {output_path}")
