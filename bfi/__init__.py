"""Brainfuck interpreter with a fixed-size circular byte tape."""

from bfi.brainfuck import BrainfuckInterpreter
from bfi.brainfuck_debugger import BrainfuckDebugger
from bfi.config import InterpreterConfig, load_config
from bfi.core.bf_runner import load_source, run_program, run_string
from bfi.core.errors import (
    InterpreterError,
    InvalidAddress,
    ResourceAcquisitionFailure,
    SourceLoadError,
    StepLimitExceeded,
    UnbalancedBrackets,
    UnexpectedLoopEnd,
)

__version__ = "0.1.0"
