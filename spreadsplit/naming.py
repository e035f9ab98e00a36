"""
Output file names.

A prefix may contain placeholders:

  [BASENAME]    original file name without extension
  [FILENUMBER]  sequence number of the source in the batch, 1-based
  [TIMESTAMP]   time of generation, yyyyMMdd_HHmmssSSS

A prefix without placeholders is simply put in front of the original name.
"""

import re
from datetime import datetime
from pathlib import PurePath
from typing import Optional

PLACEHOLDER = re.compile(r"\[(BASENAME|FILENUMBER|TIMESTAMP)\]")


def _timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return now.strftime("%Y%m%d_%H%M%S") + f"{now.microsecond // 1000:03d}"


def generate_name(prefix: Optional[str], original_name: str, file_number: int,
                  now: Optional[datetime] = None) -> str:
    prefix = prefix or ""
    original = PurePath(original_name)

    if not PLACEHOLDER.search(prefix):
        return prefix + original.name

    values = {
        "BASENAME": original.stem,
        "FILENUMBER": str(file_number),
        "TIMESTAMP": _timestamp(now),
    }
    name = PLACEHOLDER.sub(lambda match: values[match.group(1)], prefix)
    if not name.lower().endswith(".pdf"):
        name += ".pdf"
    return name
