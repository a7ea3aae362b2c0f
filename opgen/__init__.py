"""opgen: OpenAPI operation variants rendered through Jinja2 templates."""

__version__ = "0.1.0"
