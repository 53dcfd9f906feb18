import io

from gmtimer.color import reset, set_green


class _Recorder(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_set_green_writes_escape_sequence():
    stream = io.StringIO()
    set_green(stream)
    assert stream.getvalue() == "\033[1;32m"


def test_reset_writes_escape_sequence():
    stream = io.StringIO()
    reset(stream)
    assert stream.getvalue() == "\033[0m"


def test_green_then_reset_wraps_text():
    stream = io.StringIO()
    set_green(stream)
    stream.write("hello")
    reset(stream)
    assert stream.getvalue() == "\033[1;32mhello\033[0m"


def test_both_flush_the_stream():
    stream = _Recorder()
    set_green(stream)
    reset(stream)
    assert stream.flushes == 2


def test_default_stream_is_stdout(capsys):
    set_green()
    reset()
    assert capsys.readouterr().out == "\033[1;32m\033[0m"