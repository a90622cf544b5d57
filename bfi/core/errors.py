"""Fatal interpreter errors.

Every error aborts the run that raised it. Each carries a short ``code`` and a
message safe to print on the diagnostic channel.
"""


class InterpreterError(Exception):
    """Base class for everything the interpreter reports as a failed run."""

    code = "interpreter_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnbalancedBrackets(InterpreterError):
    """Raised before execution when '[' and ']' counts differ."""

    code = "unbalanced_brackets"

    def __init__(self, open_count: int, close_count: int):
        self.open_count = open_count
        self.close_count = close_count
        super().__init__(
            "unequal amount of opening and closing brackets "
            f"(#[: {open_count}, #]: {close_count})"
        )


class UnexpectedLoopEnd(InterpreterError):
    """Raised when ']' executes with no active loop on the stack."""

    code = "unexpected_loop_end"

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"unexpected end of loop at position {position}")


class InvalidAddress(InterpreterError):
    """Raised when the bounds guard finds the pointer on the sentinel address."""

    code = "invalid_address"

    def __init__(self, operation: str, address: int):
        self.operation = operation
        self.address = address
        super().__init__(f"tried {operation} invalid memory address {address}")


class ResourceAcquisitionFailure(InterpreterError):
    """Raised when the tape or loop stack buffer cannot be allocated."""

    code = "resource_acquisition"

    def __init__(self, requested: int, buffer: str = "loop stack"):
        self.requested = requested
        self.buffer = buffer
        super().__init__(f"could not allocate {buffer} of {requested} entries")


class StepLimitExceeded(InterpreterError):
    """Raised when a run executes more instructions than max_steps allows."""

    code = "step_limit"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"execution stopped after {limit} steps (possible infinite loop)")


class SourceLoadError(InterpreterError):
    """Raised when the program file cannot be read."""

    code = "source_load"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"file '{path}' open failed: {reason}")
