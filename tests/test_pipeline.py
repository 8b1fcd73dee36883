import io
import os

import pytest

from pipex.errors import CommandNotFoundError, EnvError, PipexError, UsageError
from pipex.pipeline import Pipeline, parse_args


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


def test_parse_args_plain(env):
    pipeline = parse_args(["in.txt", "cat", "wc -l", "out.txt"], env)
    assert pipeline.commands == ["cat", "wc -l"]
    assert pipeline.infile == "in.txt"
    assert pipeline.outfile == "out.txt"
    assert pipeline.limiter is None
    assert not pipeline.is_heredoc


def test_parse_args_heredoc(env):
    pipeline = parse_args(["here_doc", "EOF", "cat", "cat", "out.txt"], env)
    assert pipeline.commands == ["cat", "cat"]
    assert pipeline.limiter == "EOF"
    assert pipeline.is_heredoc
    assert pipeline.outfile == "out.txt"


def test_parse_args_env_entries():
    pipeline = parse_args(["a", "b", "c", "d"], ["PATH=/bin", "HOME=/tmp", "bogus"])
    assert pipeline.env == {"PATH": "/bin", "HOME": "/tmp"}


def test_parse_args_too_few(env):
    with pytest.raises(UsageError) as info:
        parse_args(["in", "cat", "out"], env)
    assert str(info.value) == "Error, expected atleat 4 arguments"


def test_parse_args_heredoc_too_few(env):
    with pytest.raises(UsageError) as info:
        parse_args(["here_doc", "EOF", "cat", "out"], env)
    assert str(info.value) == "Error, expected atleast 5 arguments using here_doc"


def test_run_two_commands(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("hello\n")
    outfile = tmp_path / "out.txt"
    pipeline = parse_args([str(infile), "cat", "tr a-z A-Z", str(outfile)], env)
    assert pipeline.run() == [0, 0]
    assert outfile.read_text() == "HELLO\n"


def test_run_many_commands_preserves_data(tmp_path, env):
    infile = tmp_path / "in.txt"
    content = "line one\nline two\n"
    infile.write_text(content)
    outfile = tmp_path / "out.txt"
    pipeline = parse_args([str(infile), "cat", "cat", "cat", "cat", str(outfile)], env)
    results = pipeline.run()
    assert results == [0, 0, 0, 0]
    assert outfile.read_text() == content


def test_run_truncates_output(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("new\n")
    outfile = tmp_path / "out.txt"
    outfile.write_text("old content that is longer\n")
    parse_args([str(infile), "cat", "cat", str(outfile)], env).run()
    assert outfile.read_text() == "new\n"


def test_output_mode(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    outfile = tmp_path / "out.txt"
    parse_args([str(infile), "cat", "cat", str(outfile)], env).run()
    assert os.stat(outfile).st_mode & 0o777 == 0o644 & ~_umask()


def _umask():
    current = os.umask(0)
    os.umask(current)
    return current


def test_missing_infile(tmp_path, env):
    outfile = tmp_path / "out.txt"
    pipeline = parse_args([str(tmp_path / "missing"), "cat", "cat", str(outfile)], env)
    with pytest.raises(PipexError) as info:
        pipeline.run()
    assert str(info.value) == "No such file or directory"
    assert not outfile.exists()


def test_unknown_command_reported(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    pipeline = parse_args(
        [str(infile), "cat", "no_such_command_zz", str(outfile)], env
    )
    results = pipeline.run()
    assert len(results) == 2
    assert isinstance(results[1], CommandNotFoundError)
    assert outfile.read_bytes() == b""


def test_unknown_first_command_gives_empty_input(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    pipeline = parse_args(
        [str(infile), "no_such_command_zz", "cat", str(outfile)], env
    )
    results = pipeline.run()
    assert isinstance(results[0], CommandNotFoundError)
    assert results[1] == 0
    assert outfile.read_bytes() == b""


def test_empty_environment(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    pipeline = parse_args([str(infile), "cat", "cat", str(outfile)], {})
    results = pipeline.run()
    assert all(isinstance(result, EnvError) for result in results)
    assert len(results) == 2


def test_heredoc_appends(tmp_path, env):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old\n")
    stdin = io.BytesIO(b"hello\nworld\nEOF\nignored\n")
    pipeline = parse_args(["here_doc", "EOF", "cat", "cat", str(outfile)], env)
    assert pipeline.run(stdin) == [0, 0]
    assert outfile.read_text() == "old\nhello\nworld\n"


def test_open_input_heredoc_reads_to_limiter(env):
    pipeline = Pipeline(commands=["cat"], infile=None, outfile="x", env=env, limiter="END")
    with pipeline.open_input(io.BytesIO(b"a\nENDX\nEND\nb\n")) as stream:
        assert stream.read() == b"a\nENDX\n"


def test_open_input_heredoc_needs_stream(env):
    pipeline = Pipeline(commands=["cat"], infile=None, outfile="x", env=env, limiter="END")
    with pytest.raises(PipexError):
        pipeline.open_input(None)


def test_open_output_creates_file(tmp_path, env):
    target = tmp_path / "made.txt"
    pipeline = Pipeline(commands=["cat"], infile="in", outfile=str(target), env=env)
    with pipeline.open_output() as stream:
        stream.write(b"abc")
    assert target.read_bytes() == b"abc"