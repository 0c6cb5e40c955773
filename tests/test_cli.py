import io

from b64codec.cli import main


def _run(argv, stdin=b""):
    stdout, stderr = io.BytesIO(), io.StringIO()
    status = main(argv, stdin=io.BytesIO(stdin), stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


def test_encode_stdin(log_env):
    status, out, err = _run(["encode", "-"], b"Man")
    assert status == 0
    assert out == b"TWFu\n"
    assert err == ""
    assert "ENCODE" in log_env.read_text()


def test_decode_file(log_env, tmp_path):
    path = tmp_path / "data.b64"
    path.write_bytes(b"TWFu\nTWE=\n")
    status, out, _ = _run(["decode", str(path)])
    assert status == 0
    assert out == b"ManMa"


def test_decode_failure_writes_nothing(log_env):
    status, out, err = _run(["decode", "-"], b"AB#D")
    assert status == 1
    assert out == b""
    assert err.startswith("error: InvalidCharacter:")
    assert "DECODE_FAIL" in log_env.read_text()


def test_decode_padding_failure(log_env):
    status, _, err = _run(["decode", "-"], b"TR==")
    assert status == 1
    assert "InvalidPadding" in err


def test_usage(log_env):
    for argv in ([], ["encode"], ["compress", "-"]):
        status, out, err = _run(argv)
        assert status == 2
        assert out == b""
        assert "usage" in err


def test_missing_input_file(log_env, tmp_path):
    status, out, err = _run(["decode", str(tmp_path / "nope.b64")])
    assert status == 1
    assert out == b""
    assert err.startswith("error: ")
    assert "nope.b64" in err
    assert "READ_FAIL" in log_env.read_text()


def test_usage_error_creates_no_log(log_env):
    status, _, _ = _run(["encode"])
    assert status == 2
    assert not log_env.exists()
