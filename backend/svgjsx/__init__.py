"""svgjsx — SVG cleaning and React component generation."""

__version__ = "0.1.0"
