#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right (wraps to cell 0 past the last cell)
    <   Move the pointer to the left (wraps to the last cell before cell 0)
    +   Increment the memory cell at the pointer (255 wraps to 0)
    -   Decrement the memory cell at the pointer (0 wraps to 255)
    .   Write the byte in the cell at the pointer to the output stream
    ,   Read one byte from the input stream into the cell at the pointer;
        at end of input the cell is left unchanged
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ so its condition is checked again

All other bytes are treated as comments and ignored.
"""

import io
import logging
from typing import BinaryIO, Optional, Union

from bfi.core.loops import LoopStack, skip_loop, validate_brackets
from bfi.core.tape import DEFAULT_TAPE_SIZE, Tape
from bfi.core.errors import StepLimitExceeded

logger = logging.getLogger(__name__)

COMMANDS = b'><+-.,[]'

INC, DEC, RIGHT, LEFT, OUT, IN, OPEN, CLOSE = (ord(c) for c in '+-><.,[]')

Source = Union[bytes, bytearray, str]


def as_source(code: Source) -> bytes:
    """Normalize a program to immutable bytes; text is encoded as UTF-8."""
    if isinstance(code, str):
        return code.encode('utf-8')
    return bytes(code)


class BrainfuckInterpreter:
    """Runs one program per call. Only configuration lives on the instance;
    the tape and loop stack are built fresh by every execute() call."""

    def __init__(self, memory_size: int = DEFAULT_TAPE_SIZE, max_steps: Optional[int] = None):
        self.memory_size = memory_size
        self.max_steps = max_steps

    def execute(self, code: Source, stdin: Optional[BinaryIO], stdout: BinaryIO) -> int:
        """Execute a program against binary streams.

        Returns the number of instructions executed. Raises an
        InterpreterError subclass on any fatal condition; bytes already
        written to ``stdout`` stay written.
        """
        source = as_source(code)
        open_count = validate_brackets(source)

        tape = Tape(self.memory_size)
        loops = LoopStack(open_count)
        logger.debug("run start: %d bytes, %d loops, tape of %d cells",
                     len(source), open_count, tape.size)

        end = len(source)
        ip = 0
        step_count = 0

        while ip < end:
            cmd = source[ip]
            if cmd not in COMMANDS:
                ip += 1
                continue

            step_count += 1
            if self.max_steps is not None and step_count > self.max_steps:
                raise StepLimitExceeded(self.max_steps)
            position = ip

            if cmd == INC:
                tape.check_address('incrementing value at')
                tape.increment()

            elif cmd == DEC:
                tape.check_address('decrementing value at')
                tape.decrement()

            elif cmd == RIGHT:
                tape.move_right()

            elif cmd == LEFT:
                tape.move_left()

            elif cmd == OUT:
                tape.check_address('reading from')
                stdout.write(bytes((tape.read(),)))

            elif cmd == IN:
                tape.check_address('writing to')
                data = stdin.read(1) if stdin is not None else b''
                if data:
                    tape.write(data[0])

            elif cmd == OPEN:
                tape.check_address('reading from')
                if tape.read() != 0:
                    loops.push(ip)
                else:
                    ip = skip_loop(source, ip)

            elif cmd == CLOSE:
                # Land just before the '[' so the loop condition is re-evaluated
                ip = loops.pop(ip) - 1

            self._after_step(step_count, position, cmd, tape)
            ip += 1

        logger.debug("run complete: %d steps", step_count)
        return step_count

    def run(self, code: Source, input_data: Union[bytes, str] = b'') -> bytes:
        """Execute Brainfuck code with in-memory input and return the output bytes."""
        if isinstance(input_data, str):
            input_data = input_data.encode('utf-8')
        stdout = io.BytesIO()
        self.execute(code, io.BytesIO(input_data), stdout)
        return stdout.getvalue()

    def _after_step(self, step: int, position: int, cmd: int, tape: Tape) -> None:
        """Hook called after each executed instruction. No-op here."""
