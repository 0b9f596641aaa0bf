import importlib
from types import ModuleType
from typing import Any


class LazyModule:
    """
    Stand-in for a module that is imported on first attribute access.

    Keeps ``import arrowframe`` cheap when only part of the third-party stack
    is needed, e.g. polars is only imported once interop is used.

    Example:
        pl = LazyModule("polars")
        pl.DataFrame({"a": [1]})  # polars is imported here
    """

    def __init__(self, module_name: str, package: str | None = None):
        self._module_name = module_name
        self._package = package
        self._module: ModuleType | None = None

    @property
    def is_loaded(self) -> bool:
        return self._module is not None

    def _load_module(self) -> ModuleType:
        if self._module is None:
            self._module = importlib.import_module(self._module_name, self._package)
        return self._module

    def __getattr__(self, name: str) -> Any:
        # private lookups must not trigger an import (copy/pickle probe these)
        if name.startswith("_"):
            raise AttributeError(
                f"'{self.__class__.__name__}' object has no attribute '{name}'"
            )
        return getattr(self._load_module(), name)

    def __dir__(self) -> list[str]:
        return dir(self._module) if self._module is not None else []

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "not loaded"
        return f"<LazyModule '{self._module_name}' ({state})>"
