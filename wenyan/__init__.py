"""WenYan: Markdown themes for content platforms."""

__version__ = "1.0.0"
