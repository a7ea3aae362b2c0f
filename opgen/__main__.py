"""Entry point: python -m opgen [config.json]

Reads the configuration (default: opgen.json in the working directory),
loads the OpenAPI document it names and generates the client.
"""

from __future__ import annotations

import logging
import sys

from .codegen import generate
from .exceptions import ConfigError, GeneratorError
from .loader import load_spec
from .options import load_options

DEFAULT_CONFIG = "opgen.json"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        options = load_options(args[0] if args else DEFAULT_CONFIG)
        if not options.input:
            raise ConfigError("No input OpenAPI document configured")
        spec = load_spec(options.input)
        generate(spec, options)
    except GeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
