class ComplexError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class DomainError(ComplexError, ValueError):
    """An operation was asked for a value outside its mathematical domain."""


class InvalidRootError(DomainError):
    pass


class PoleError(DomainError):
    pass
