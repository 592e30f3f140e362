from .perenual_client import PerenualClient

__all__ = ["PerenualClient"]
