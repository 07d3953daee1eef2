"""Registry for proof output formats."""

from pathlib import Path
from typing import Any, Dict, Optional, Type

from .ascii import AsciiFormat
from .base import ProofFormat
from .latex import LatexFormat


class FormatRegistry:
    """Registry for managing proof output formats."""

    def __init__(self):
        self._formats: Dict[str, Type[ProofFormat]] = {}
        self._register_default_formats()

    def _register_default_formats(self):
        """Register default output formats."""
        self.register('ascii', AsciiFormat)
        self.register('latex', LatexFormat)

    def register(self, name: str, format_class: Type[ProofFormat]):
        """Register a new output format."""
        self._formats[name.lower()] = format_class

    def get_handler(self, format_name: str, **kwargs: Any) -> ProofFormat:
        """Get an output format by name."""
        name = format_name.lower()
        if name not in self._formats:
            raise ValueError(f"Unknown proof format: {format_name} "
                             f"(available: {', '.join(self.list_formats())})")
        return self._formats[name](**kwargs)

    def get_handler_for_file(self, file_path: Path, **kwargs: Any) -> ProofFormat:
        """Get the format matching a file extension."""
        for format_class in self._formats.values():
            handler = format_class(**kwargs)
            if file_path.suffix in handler.extensions:
                return handler

        raise ValueError(f"No format found for file extension: {file_path.suffix} "
                         f"(available: {', '.join(self.list_formats())})")

    def list_formats(self) -> list:
        return list(self._formats.keys())


_registry = FormatRegistry()


def get_format_handler(format_name: Optional[str] = None, file_path: Optional[Path] = None,
                       **kwargs: Any) -> ProofFormat:
    """Get a proof output format."""
    if format_name:
        return _registry.get_handler(format_name, **kwargs)
    elif file_path:
        return _registry.get_handler_for_file(Path(file_path), **kwargs)
    else:
        raise ValueError("Either format_name or file_path must be provided")
