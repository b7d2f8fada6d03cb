"""blueprint - interactive project scaffolding."""

__version__ = "0.3.8"
