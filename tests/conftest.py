import pytest

from spreadsplit.documents import SourcePage
from spreadsplit.exceptions import PermissionDeniedError, SaveError


class FakePage:
    def __init__(self, content, crop=None):
        self.content = content
        self.crop = crop


class FakeDocument:
    """In-memory document handle."""

    def __init__(self, name="<new>", boxes=(), permissions=None, fail_save=False, fail_close=False):
        self.name = name
        self.boxes = list(boxes)
        self.permissions = permissions
        self.fail_save = fail_save
        self.fail_close = fail_close
        self.pages = []
        self.version = None
        self.metadata = {}
        self.closed = False
        self.moves = []

    def page_count(self):
        if self.boxes:
            return len(self.boxes)
        return len(self.pages)

    def page(self, number):
        return SourcePage(f"{self.name}#{number}", self.boxes[number - 1])

    def ensure_permission(self, permission):
        if self.permissions is not None and permission not in self.permissions:
            raise PermissionDeniedError(self.name, permission)

    def import_page(self, content):
        page = FakePage(content)
        self.pages.append(page)
        return page

    def set_crop_box(self, page, box):
        page.crop = box

    def move_page_to_end(self, position):
        self.moves.append(position)
        self.pages.append(self.pages.pop(position - 1))

    def set_format_version(self, version):
        self.version = version

    def initialise_from(self, source):
        self.metadata = {"/Title": source.name}

    def save(self, path):
        if self.fail_save:
            raise SaveError(f"disk full while writing {path}")
        with open(path, "w") as f:
            f.write("\n".join(p.content for p in self.pages))
        return path

    def close(self):
        self.closed = True
        if self.fail_close:
            raise OSError("close failed")


class FakeSource:
    def __init__(self, name, boxes, permissions=None):
        self.name = name
        self.boxes = boxes
        self.permissions = permissions

    def open(self, opener):
        return opener.open(self)

    def __str__(self):
        return self.name


class FakeOpener:
    def __init__(self, fail_save=False, fail_close=False):
        self.fail_save = fail_save
        self.fail_close = fail_close
        self.opened = []
        self.created = []

    def open(self, source):
        document = FakeDocument(source.name, source.boxes, source.permissions, fail_close=self.fail_close)
        self.opened.append(document)
        return document

    def create(self):
        document = FakeDocument(fail_save=self.fail_save, fail_close=self.fail_close)
        self.created.append(document)
        return document


class RecordingNotifier:
    def __init__(self):
        self.reports = []

    def report(self, current_step, total_steps):
        self.reports.append((current_step, total_steps))


@pytest.fixture
def opener():
    return FakeOpener()


@pytest.fixture
def notifier():
    return RecordingNotifier()
