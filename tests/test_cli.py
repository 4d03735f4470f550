from typer.testing import CliRunner

from encloop.cli import app

runner = CliRunner()


def test_defaults_run_and_clean_up(tmp_path):
    result = runner.invoke(app, ["--temp-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert list(tmp_path.iterdir()) == []


def test_encoding_and_repeat_positional(tmp_path):
    result = runner.invoke(app, ["latin-1", "3", "--temp-dir", str(tmp_path), "--quiet"])
    assert result.exit_code == 0, result.output
    assert "[ERR]" not in result.output
    assert list(tmp_path.iterdir()) == []


def test_repeat_zero(tmp_path):
    result = runner.invoke(app, ["UTF-8", "0", "--temp-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert list(tmp_path.iterdir()) == []


def test_unknown_encoding_exits_before_io(tmp_path):
    result = runner.invoke(app, ["no-such-charset", "5", "--temp-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "[ERR]" in result.output
    assert "unknown encoding" in result.output
    assert list(tmp_path.iterdir()) == []


def test_non_numeric_repeat_is_usage_error(tmp_path):
    result = runner.invoke(app, ["UTF-8", "lots", "--temp-dir", str(tmp_path)])
    assert result.exit_code == 2
    assert list(tmp_path.iterdir()) == []


def test_record_option(tmp_path):
    record = tmp_path / "runs"
    temp = tmp_path / "tmp"
    temp.mkdir()
    result = runner.invoke(app, ["UTF-16", "2", "--temp-dir", str(temp), "--record", str(record)])
    assert result.exit_code == 0, result.output
    (run_dir,) = list(record.iterdir())
    assert (run_dir / "result.json").exists()
    assert list(temp.iterdir()) == []


def test_io_failure_is_nonzero(tmp_path):
    result = runner.invoke(app, ["UTF-8", "1", "--temp-dir", str(tmp_path / "missing"), "--quiet"])
    assert result.exit_code != 0
    assert isinstance(result.exception, OSError)


def test_underscored_repeat_rejected(tmp_path):
    result = runner.invoke(app, ["UTF-8", "5_0", "--temp-dir", str(tmp_path)])
    assert result.exit_code == 2
    assert list(tmp_path.iterdir()) == []


def test_repeat_beyond_32_bits_rejected(tmp_path):
    result = runner.invoke(app, ["UTF-8", "2147483648", "--temp-dir", str(tmp_path)])
    assert result.exit_code == 2
    assert list(tmp_path.iterdir()) == []


def test_negative_repeat_is_config_error(tmp_path):
    result = runner.invoke(app, ["UTF-8", "-1", "--temp-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "[ERR]" in result.output
    assert "repeat" in result.output
    assert list(tmp_path.iterdir()) == []


def test_signed_repeat_accepted(tmp_path):
    result = runner.invoke(app, ["UTF-8", "+2", "--temp-dir", str(tmp_path), "--quiet"])
    assert result.exit_code == 0, result.output
    assert list(tmp_path.iterdir()) == []
