class RecipeRepositoryError(Exception):
    """Base class for every failure raised by the recipe repository."""


class StorageUnavailable(RecipeRepositoryError):
    """The backing file could not be opened, read, decoded or written."""

    def __init__(self, path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Recipe file unavailable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FormatError(RecipeRepositoryError, ValueError):
    """A line of the recipe file violates the expected structure."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{message} at line {line_number}: {line!r}"
        super().__init__(message)


class IndexOutOfRange(RecipeRepositoryError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No recipe at index {index} (collection holds {size})")
