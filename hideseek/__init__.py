"""Hide-and-seek game client: JSON line request client, GUI components and render batching."""

__version__ = "0.1.0"
__all__ = ["client", "components", "render"]