"""Touch contacts, contact tracking, heatmap helpers and input event generation."""

__version__ = "0.1.0"

__all__ = ["contact", "tracking", "ellipse", "kernels", "neutral", "overlaps", "touch"]