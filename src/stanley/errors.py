"""Error types raised while scaffolding content"""

from pathlib import Path


class IOFailure(Exception):
    """Writing a content file failed at the OS level."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"could not write {path}: {cause.strerror or cause}")


class UnreachableSelection(RuntimeError):
    """A selection prompt returned an index outside its options."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"selection index {index} has no content kind")
