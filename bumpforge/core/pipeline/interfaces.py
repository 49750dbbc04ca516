"""
Core interfaces for bumpforge file transforms.

A FileTransform handles one file unit per call. Results are handed to an
``emit`` callable (the downstream side of the pipeline); failures are raised.
Returning from process() is the completion signal for the unit, so every exit
path completes the unit exactly once.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, List, Optional

from bumpforge.core.pipeline.file_unit import ManifestFile

Emit = Callable[[ManifestFile], None]


class FileTransform(ABC):
    """Interface for all file transforms."""

    @abstractmethod
    def process(self, file: ManifestFile, emit: Optional[Emit] = None) -> None:
        """
        Transform one file unit.

        Args:
            file: The input unit.
            emit: Receives each output unit; may be None to discard output.

        Raises:
            TransformError: If the unit cannot be transformed.
        """
        pass

    def pipe(self, files: Iterable[ManifestFile]) -> Iterator[ManifestFile]:
        """
        Transform units one after another, yielding each output unit.

        Output of a unit is yielded before its processing completes; the
        next unit is only pulled from ``files`` after that.
        """
        for file in files:
            pending: List[ManifestFile] = []
            for _ in self._stages(file, pending.append):
                yield from pending
                pending.clear()
            yield from pending

    def _stages(self, file: ManifestFile, emit: Emit) -> Iterator[None]:
        """
        Processing of one unit, split at its suspension points.

        The default runs process() in one go. Transforms with a side effect
        after emission override this to yield once output is ready.
        """
        self.process(file, emit)
        yield

    def is_available(self) -> bool:
        """Check if the transform and its dependencies are available."""
        return True
