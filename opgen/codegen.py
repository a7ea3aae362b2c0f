"""Render templates and write generated output.

Normalizes every operation of the document, then writes one module per
operation variant plus an index module re-exporting all of them. Variants
whose names reduce to the same module path get a numeric suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .context_builder import build_globals, variant_context, variant_module
from .operation import collect_operations
from .options import Options
from .templates import BUILTIN_TEMPLATE_DIR, TemplateStore
from .variants import unique_name


def generate(
    spec: dict[str, Any],
    options: Options,
    builtin_dir: Path | str = BUILTIN_TEMPLATE_DIR,
) -> list[Path]:
    """Generate the client into ``options.output``; return the written files."""
    operations = collect_operations(spec, options)

    store = TemplateStore(builtin_dir, options.templates)
    store.set_globals(build_globals(spec, operations, options))
    renderer = store.freeze()

    output_dir = Path(options.output).resolve()
    written: list[Path] = []
    modules: list[str] = []

    for operation in operations:
        for variant in operation.variants:
            module = unique_name(variant_module(variant, options), set(modules))
            output_path = output_dir / f"{module}{options.file_extension}"
            renderer.write("fn", variant_context(variant, options), output_path)
            modules.append(module)
            written.append(output_path)

    index_path = output_dir / f"index{options.file_extension}"
    renderer.write("index", {"modules": modules}, index_path)
    written.append(index_path)

    print(f"Generated {len(modules)} functions from {len(operations)} operations into {output_dir}")
    return written
