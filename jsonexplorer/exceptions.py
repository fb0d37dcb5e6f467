from typing import Optional


class JsonExplorerError(Exception):
    """Base class of errors reported by jsonexplorer"""

    pass


class FileReadError(JsonExplorerError):
    """Document file could not be opened or read"""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super(FileReadError, self).__init__(message)
        self.path = path


class ParseError(JsonExplorerError):
    """Document content is not valid JSON"""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
    ) -> None:
        super(ParseError, self).__init__(message)
        self.path = path
        self.lineno = lineno
        self.colno = colno


class NotFoundNodeError(JsonExplorerError):
    """Requested node identifier is not present in displayed tree"""

    pass
