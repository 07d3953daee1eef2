"""Base class for proof output formats."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union


class ProofFormat(ABC):
    """Abstract base class for proof renderers.

    A renderer reads a proof's scopes and steps and never modifies them.
    """

    @abstractmethod
    def format_proof(self, proof, **kwargs) -> str:
        """Format a proof as a string.

        Args:
            proof: The proof to render
            **kwargs: Additional format-specific options

        Returns:
            String representation of the proof
        """
        pass

    def write_file(self, proof, file_path: Union[str, Path], **kwargs) -> None:
        """Write the rendered proof to a file."""
        Path(file_path).write_text(self.format_proof(proof, **kwargs), encoding="utf-8")

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """Return list of file extensions this format writes."""
        pass
