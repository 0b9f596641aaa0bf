from .lazy_module import LazyModule

__all__ = ["LazyModule"]
