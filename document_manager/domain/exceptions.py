"""Domain exception hierarchy."""


class DomainException(Exception):
    pass


class DuplicateRecordError(DomainException):
    def __init__(self, message: str = "Cannot add document, this document already exists!") -> None:
        super().__init__(message)


class InvalidQueryError(DomainException):
    pass


class DocumentLoadException(DomainException):
    pass


class DocumentNotFoundException(DomainException):
    pass
