## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class OptError(Exception):
    def __init__(self, message: str = "", *, option=None, rule=None):
        """Base class for all errors raised while declaring or parsing options."""
        super().__init__(message)
        self.option: str = option
        self.rule: str = rule

class OptConfigError(OptError, RuntimeError):
    """Registry used out of phase, or a declaration bound to the wrong kind of var."""
    pass

class OptLetterError(OptConfigError, ValueError):
    pass

class OptSignatureError(OptConfigError, ValueError):
    def __init__(self, message, *, option=None, rule='signature', column=None, token=None):
        super().__init__(message, option=option, rule=rule)
        self.column = column
        self.token = token

class OptDuplicateError(OptError, ValueError):
    pass


class OptUnrecognizedError(OptError, LookupError):
    pass

class OptMissingValueError(OptError, ValueError):
    pass

class OptAllocationError(OptError, MemoryError):
    pass
