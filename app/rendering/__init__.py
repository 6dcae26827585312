from .renderer import OutputFormat, Renderer

__all__ = ["OutputFormat", "Renderer"]
