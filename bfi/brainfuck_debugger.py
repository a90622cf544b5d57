#!/usr/bin/env python3
"""
Brainfuck Step Tracer

Runs a program exactly like BrainfuckInterpreter, and after every executed
instruction writes one line describing the step: source position, command,
pointer, cell value, and a window of the tape around the pointer.
"""

import sys
from typing import Optional, TextIO

from bfi.brainfuck import BrainfuckInterpreter
from bfi.core.tape import DEFAULT_TAPE_SIZE, Tape


class BrainfuckDebugger(BrainfuckInterpreter):
    """Brainfuck interpreter that traces every step to a text stream."""

    def __init__(self, memory_size: int = DEFAULT_TAPE_SIZE, max_steps: Optional[int] = None,
                 show_memory_range: int = 10, trace_stream: Optional[TextIO] = None):
        super().__init__(memory_size, max_steps)
        self.show_memory_range = show_memory_range
        self.trace_stream = trace_stream

    def _after_step(self, step, position, cmd, tape):
        stream = self.trace_stream if self.trace_stream is not None else sys.stderr
        stream.write(self.format_step(step, position, cmd, tape) + "\n")

    def format_step(self, step: int, position: int, cmd: int, tape: Tape) -> str:
        return (f"step {step:6d} ip={position:<6d} cmd='{chr(cmd)}' "
                f"ptr={tape.pointer:<5d} cell={tape.read():3d} mem={self._memory_window(tape)}")

    def _memory_window(self, tape: Tape) -> str:
        """Show memory tape (focused around pointer); the pointed cell is bracketed."""
        start = max(0, tape.pointer - self.show_memory_range // 2)
        end = min(tape.size, start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        shown = []
        for offset, value in enumerate(tape.snapshot(start, end)):
            if start + offset == tape.pointer:
                shown.append(f"[{value}]")
            else:
                shown.append(str(value))
        return f"{start}:" + " ".join(shown)
