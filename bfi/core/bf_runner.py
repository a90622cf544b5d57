import logging
from typing import BinaryIO, Optional, Union

from bfi.brainfuck import BrainfuckInterpreter, Source
from bfi.brainfuck_debugger import BrainfuckDebugger
from bfi.config import InterpreterConfig
from bfi.core.errors import InterpreterError, SourceLoadError

logger = logging.getLogger(__name__)


def load_source(path: str) -> bytes:
    """Read a whole program file into memory."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise SourceLoadError(path, e.strerror or str(e)) from e


def build_interpreter(config: Optional[InterpreterConfig] = None) -> BrainfuckInterpreter:
    config = config or InterpreterConfig()
    if config.trace:
        return BrainfuckDebugger(config.tape_size, config.max_steps,
                                 show_memory_range=config.trace_window)
    return BrainfuckInterpreter(config.tape_size, config.max_steps)


def run_program(source: Source, stdin: Optional[BinaryIO], stdout: BinaryIO,
                config: Optional[InterpreterConfig] = None) -> bool:
    """Run one program and report the outcome.

    Failures are logged on the error channel rather than raised.
    Returns True on success, False on any interpreter error.
    """
    itp = build_interpreter(config)
    try:
        itp.execute(source, stdin, stdout)
    except InterpreterError as e:
        logger.error("%s", e)
        return False
    return True


def run_string(code: Source, input_data: Union[bytes, str] = b"",
               config: Optional[InterpreterConfig] = None) -> bytes:
    """Execute code with in-memory input and return the output (errors propagate)."""
    return build_interpreter(config).run(code, input_data)
