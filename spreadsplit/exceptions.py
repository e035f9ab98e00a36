"""
Exceptions raised while splitting spreads.
"""


class SplitSpreadsError(Exception):
    """Base exception for spread splitting errors."""
    pass


class SourceOpenError(SplitSpreadsError):
    """Raised when a source document cannot be read or decrypted."""
    pass


class PermissionDeniedError(SplitSpreadsError):
    """Raised when a source does not grant the permission a task needs.

    Aborts the whole batch, remaining sources are not processed.
    """

    def __init__(self, source, permission):
        super().__init__(f"{source} does not grant the {permission.name} permission")
        self.source = source
        self.permission = permission


class MalformedGeometryError(SplitSpreadsError):
    """Raised when a page box has a non-positive width or height."""
    pass


class SaveError(SplitSpreadsError):
    """Raised when a destination document cannot be written."""
    pass


class OutputConflictError(SplitSpreadsError):
    """Raised when an output name clashes with another output or an existing file."""
    pass
