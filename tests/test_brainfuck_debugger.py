import io

from bfi.brainfuck import BrainfuckInterpreter
from bfi.brainfuck_debugger import BrainfuckDebugger


def test_trace_has_one_line_per_step():
    trace = io.StringIO()
    dbg = BrainfuckDebugger(memory_size=8, trace_stream=trace)
    assert dbg.run(b"+x>+.") == b"\x01"
    lines = trace.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("step      1 ip=0 ")
    assert "cmd='>'" in lines[1]
    assert "ip=2" in lines[1]


def test_trace_shows_state_after_step():
    trace = io.StringIO()
    BrainfuckDebugger(memory_size=8, show_memory_range=4, trace_stream=trace).run(b"++>+")
    last = trace.getvalue().splitlines()[-1]
    assert "ptr=1" in last
    assert "cell=  1" in last
    assert "mem=0:2 [1] 0 0" in last


def test_memory_window_follows_pointer_to_tape_end():
    trace = io.StringIO()
    BrainfuckDebugger(memory_size=10, show_memory_range=4, trace_stream=trace).run(b"<+")
    assert trace.getvalue().splitlines()[-1].endswith("mem=6:0 0 0 [1]")


def test_same_output_as_plain_interpreter(hello_world):
    trace = io.StringIO()
    traced = BrainfuckDebugger(trace_stream=trace).run(hello_world)
    assert traced == BrainfuckInterpreter().run(hello_world)
