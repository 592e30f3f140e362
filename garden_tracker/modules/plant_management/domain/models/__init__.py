from .plant import Plant

__all__ = ["Plant"]
