from enum import Enum


class ErrorKind(Enum):
    TOKENIZE = "TokenizeError"
    NOT_INDEXABLE = "NotIndexable"
    INVALID_TARGET = "InvalidTarget"
    NOT_INVOCABLE = "NotInvocable"


class LPathError(Exception):
    kind: ErrorKind

    def __init__(self, path: str | None, token: str | None, message: str):
        super().__init__(f"{message} (path='{path}', token='{token}')")
        self.path = path
        self.token = token
        self.message = message


class LPathTokenizeError(LPathError):
    kind = ErrorKind.TOKENIZE


class LPathNotIndexableError(LPathError):
    kind = ErrorKind.NOT_INDEXABLE


class LPathInvalidTargetError(LPathError):
    kind = ErrorKind.INVALID_TARGET


class LPathNotInvocableError(LPathError):
    kind = ErrorKind.NOT_INVOCABLE
