from .error import (
    CasekitError, TypeMismatchError, MissingValueError, InvalidNumericError,
    EmptyInputError, UnknownCaseStyleError, ConfigError
)
