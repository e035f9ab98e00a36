"""
PDF documents backed by pypdf.

A source document is read with PdfReader, a destination document is built
with PdfWriter. Destination pages are kept in a list and only added to the
writer's page tree when the document is saved, so moving pages around is a
plain list operation.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from pypdf import PasswordType, PdfReader, PdfWriter
from pypdf.constants import UserAccessPermissions
from pypdf.errors import PdfReadError
from pypdf.generic import RectangleObject

from .exceptions import PermissionDeniedError, SaveError, SourceOpenError
from .geometry import BoundingBox

logger = logging.getLogger(__name__)

PDF_VERSIONS = ("1.0", "1.1", "1.2", "1.3", "1.4", "1.5", "1.6", "1.7", "2.0")


class Permission(Enum):
    PRINT = UserAccessPermissions.PRINT
    MODIFY = UserAccessPermissions.MODIFY
    COPY_AND_EXTRACT = UserAccessPermissions.EXTRACT
    ANNOTATE = UserAccessPermissions.ADD_OR_MODIFY
    FILL_FORMS = UserAccessPermissions.FILL_FORM_FIELDS
    ASSEMBLE = UserAccessPermissions.ASSEMBLE_DOC


@dataclass(frozen=True)
class SourcePage:
    content: Any
    box: BoundingBox


def box_from_rectangle(rectangle) -> BoundingBox:
    return BoundingBox(float(rectangle.left), float(rectangle.bottom),
                       float(rectangle.right), float(rectangle.top))


@dataclass
class PdfSource:
    """A PDF file on disk, optionally protected by a password."""
    path: Path
    password: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self):
        self.path = Path(self.path)
        if self.name is None:
            self.name = self.path.name

    def open(self, opener):
        return opener.open(self)

    def __str__(self):
        return str(self.path)


class PdfDocumentHandle:
    """
    Wraps either a PdfReader (source) or a PdfWriter (destination).

    Page numbers and positions are 1-based.
    """

    def __init__(self, reader: Optional[PdfReader] = None, owner: bool = False, name: str = "<new document>"):
        self.reader = reader
        self.writer = PdfWriter() if reader is None else None
        self.name = name
        self._owner = owner
        self._pages: List[Any] = []
        self._version: Optional[str] = None

    def page_count(self) -> int:
        if self.reader is not None:
            return len(self.reader.pages)
        return len(self._pages)

    def page(self, number: int) -> SourcePage:
        page = self.reader.pages[number - 1]
        # trimbox falls back to the crop box, then to the media box
        return SourcePage(page, box_from_rectangle(page.trimbox))

    def ensure_permission(self, permission: Permission) -> None:
        if self.reader is None or not self.reader.is_encrypted or self._owner:
            return
        encrypt = self.reader.trailer["/Encrypt"].get_object()
        flags = int(encrypt.get("/P", -1))
        if not flags & permission.value:
            raise PermissionDeniedError(self.name, permission)

    def import_page(self, content):
        page = content.clone(self.writer, force_duplicate=True, ignore_fields=("/Parent",))
        self._pages.append(page)
        return page

    def set_crop_box(self, page, box: BoundingBox) -> None:
        page.cropbox = RectangleObject(box.as_list())

    def move_page_to_end(self, position: int) -> None:
        if not 1 <= position <= len(self._pages):
            raise IndexError(f"No page at position {position}, document has {len(self._pages)} pages")
        self._pages.append(self._pages.pop(position - 1))

    def set_format_version(self, version: Optional[str]) -> None:
        if version is None:
            return
        if version not in PDF_VERSIONS:
            raise ValueError(f"Unsupported PDF version: {version}")
        self._version = version

    def initialise_from(self, source: "PdfDocumentHandle") -> None:
        """Carry over document information, page layout and page mode."""
        reader = source.reader
        if reader.metadata:
            self.writer.add_metadata(reader.metadata)
        if reader.page_layout:
            self.writer.page_layout = reader.page_layout
        if reader.page_mode:
            self.writer.page_mode = reader.page_mode
        if self._version is None:
            self._version = reader.pdf_header.replace("%PDF-", "")

    def save(self, path) -> Path:
        path = Path(path)
        for page in self._pages:
            self.writer.add_page(page)
        if self._version:
            self.writer.pdf_header = f"%PDF-{self._version}".encode()
        try:
            with open(path, "wb") as f:
                self.writer.write(f)
        except OSError as e:
            raise SaveError(f"Unable to save {self.name} to {path}: {e}") from e
        logger.debug("Saved %d pages to %s", len(self._pages), path)
        return path

    def close(self) -> None:
        if self.writer is not None:
            self.writer.close()
        if self.reader is not None:
            self.reader.close()
        self._pages = []


class PypdfOpener:
    """Opens sources and creates empty destination documents."""

    def open(self, source: PdfSource) -> PdfDocumentHandle:
        try:
            reader = PdfReader(str(source.path))
        except (OSError, PdfReadError) as e:
            raise SourceOpenError(f"Unable to open {source}: {e}") from e

        owner = False
        if reader.is_encrypted:
            result = reader.decrypt(source.password or "")
            if result == PasswordType.NOT_DECRYPTED:
                reader.close()
                raise SourceOpenError(f"Unable to decrypt {source}, wrong password")
            owner = result == PasswordType.OWNER_PASSWORD
        return PdfDocumentHandle(reader, owner=owner, name=source.name)

    def create(self) -> PdfDocumentHandle:
        return PdfDocumentHandle()
