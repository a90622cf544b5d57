import io

import pytest

HELLO_WORLD = (
    b"++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    b">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


@pytest.fixture
def hello_world():
    return HELLO_WORLD


@pytest.fixture
def streams():
    """Fresh (stdin, stdout) pair of in-memory binary streams."""
    def make(data=b""):
        return io.BytesIO(data), io.BytesIO()
    return make
