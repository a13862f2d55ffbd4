class CasekitError(Exception):
    """Base error for casekit"""
    def __init__(self, message: str = None, source: Exception = None):
        self.message = message
        self.source = source
        super().__init__(self.__str__())

    def __str__(self):
        msg = self.message or self.__class__.__name__
        if self.source:
            return f"{msg}: {self.source}"
        return msg

class TypeMismatchError(CasekitError, TypeError):
    pass

class MissingValueError(CasekitError, ValueError):
    pass

class InvalidNumericError(CasekitError, ValueError):
    pass

class EmptyInputError(CasekitError, ValueError):
    pass

class UnknownCaseStyleError(CasekitError, ValueError):
    pass

class ConfigError(CasekitError):
    pass
