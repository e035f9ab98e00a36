"""
Temporary buffers, the output registry and the directory sink.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict

from .exceptions import OutputConflictError, SaveError

logger = logging.getLogger(__name__)


def create_temporary_buffer(suffix: str = ".pdf") -> Path:
    fd, name = tempfile.mkstemp(prefix="spreadsplit_", suffix=suffix)
    os.close(fd)
    return Path(name)


class OutputRegistry:
    """Temporary buffers waiting to be committed, keyed by output name."""

    def __init__(self, overwrite: bool = False):
        self.overwrite = overwrite
        self.outputs: Dict[str, Path] = {}

    def add_output(self, buffer, name: str) -> None:
        if name in self.outputs:
            raise OutputConflictError(f"More than one output is named {name}")
        self.outputs[name] = Path(buffer)

    def commit(self, sink) -> None:
        sink.accept(self)

    def discard(self) -> None:
        """Remove every temporary buffer without committing it."""
        for buffer in self.outputs.values():
            try:
                buffer.unlink()
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.warning("Unable to delete temporary buffer %s: %s", buffer, e)
        self.outputs.clear()

    def __len__(self):
        return len(self.outputs)


class DirectoryOutput:
    """Moves registered buffers into a directory, honouring the overwrite flag."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def accept(self, registry: OutputRegistry) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

        # check everything first, a refused file must not leave a partial commit
        targets = {name: self.directory / name for name in registry.outputs}
        if not registry.overwrite:
            existing = [str(path) for path in targets.values() if path.exists()]
            if existing:
                raise OutputConflictError(
                    f"Refusing to overwrite existing file(s): {', '.join(existing)}"
                )

        for name, buffer in registry.outputs.items():
            target = targets[name]
            try:
                shutil.move(str(buffer), str(target))
            except OSError as e:
                raise SaveError(f"Unable to write {target}: {e}") from e
            logger.info("Wrote %s", target)
        registry.outputs.clear()

    def __str__(self):
        return str(self.directory)
