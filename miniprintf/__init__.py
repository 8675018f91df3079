"""A small printf-style formatter (``formatter``) and its primitive writers (``writers``)."""

__version__ = "0.1.0"
__all__ = ["formatter", "writers"]