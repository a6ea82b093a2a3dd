"""Search index writes."""

from .gateway import IndexGateway

__all__ = ["IndexGateway"]
