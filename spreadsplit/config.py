"""
Parameters of a split run.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .documents import PDF_VERSIONS
from .repagination import Repagination


@dataclass
class SplitParameters:
    source_list: List[Any] = field(default_factory=list)
    output: Any = None
    output_prefix: str = ""
    overwrite: bool = False
    version: Optional[str] = None
    repagination: Repagination = Repagination.NONE

    def __post_init__(self):
        if isinstance(self.repagination, str):
            self.repagination = Repagination(self.repagination)
        if self.version is not None and self.version not in PDF_VERSIONS:
            raise ValueError(f"Unsupported PDF version: {self.version}")

    def validate(self) -> None:
        if not self.source_list:
            raise ValueError("At least one source is required")
        if self.output is None:
            raise ValueError("An output is required")
