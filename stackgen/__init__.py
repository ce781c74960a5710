"""stack-generator: interactive scaffolding for full-stack web projects."""

__version__ = "1.0.0"
