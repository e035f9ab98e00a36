"""Split double-layout PDF pages down the middle."""

from .batch import process_source, run_batch
from .config import SplitParameters
from .documents import PdfSource, PypdfOpener
from .exceptions import (
    MalformedGeometryError,
    OutputConflictError,
    PermissionDeniedError,
    SaveError,
    SourceOpenError,
    SplitSpreadsError,
)
from .geometry import BoundingBox, Orientation, classify_orientation, split_box
from .output import DirectoryOutput
from .repagination import Repagination, last_first_moves, last_first_order

__version__ = "0.2.0"
