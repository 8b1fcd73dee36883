import io

from pipex.heredoc import iter_lines, read_heredoc


def test_iter_lines_keeps_newlines():
    lines = list(iter_lines(io.StringIO("one\ntwo\nthree")))
    assert lines == ["one\n", "two\n", "three"]
    assert "".join(lines) == "one\ntwo\nthree"


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


def test_iter_lines_bytes():
    assert list(iter_lines(io.BytesIO(b"a\n\nb\n"))) == [b"a\n", b"\n", b"b\n"]


def test_read_heredoc_stops_at_limiter():
    stream = io.StringIO("hello\nworld\nEOF\nafter\n")
    assert read_heredoc(stream, "EOF") == "hello\nworld\n"
    assert stream.read() == "after\n"


def test_read_heredoc_limiter_must_be_whole_line():
    stream = io.StringIO("EOFX\nEO\nEOF\n")
    assert read_heredoc(stream, "EOF") == "EOFX\nEO\n"


def test_read_heredoc_without_limiter_reads_everything():
    text = "a\nb\n"
    assert read_heredoc(io.StringIO(text), "END") == text


def test_read_heredoc_immediate_limiter():
    assert read_heredoc(io.StringIO("END\nrest\n"), "END") == ""


def test_read_heredoc_bytes_stream():
    stream = io.BytesIO(b"x\nLIM\ny\n")
    assert read_heredoc(stream, "LIM") == b"x\n"


def test_read_heredoc_empty_limiter_ends_at_blank_line():
    assert read_heredoc(io.StringIO("a\n\nb\n"), "") == "a\n"