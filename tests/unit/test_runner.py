import pytest

from bicdir.converter import runner


def test_runner_reports_count(monkeypatch, tmp_path, capsys):
    calls = []

    def fake_convert(source, destination):
        calls.append((source, destination))
        return 7

    monkeypatch.setattr(runner, "convert_to_csv", fake_convert)
    dest = str(tmp_path / "out.csv")
    runner.main(["--source", "in.pdf", "-d", dest])
    out = capsys.readouterr().out
    assert calls == [("in.pdf", dest)]
    assert "Converting in.pdf to" in out
    assert f"Extracted 7 records to {dest}" in out


def test_runner_defaults(monkeypatch):
    seen = {}

    def fake_convert(source, destination):
        seen["args"] = (source, destination)
        return 0

    monkeypatch.setattr(runner, "convert_to_csv", fake_convert)
    runner.main([])
    assert seen["args"] == ("ISOBIC.pdf", "ISOBIC.csv")


def test_runner_exits_on_classified_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        runner.main(["-s", str(tmp_path / "missing.pdf"), "-d", str(tmp_path / "out.csv")])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().out
    assert not (tmp_path / "out.csv").exists()


def test_runner_exits_on_unexpected_error(monkeypatch, capsys):
    def boom(source, destination):
        raise RuntimeError("unexpected token")

    monkeypatch.setattr(runner, "convert_to_csv", boom)
    with pytest.raises(SystemExit) as exc:
        runner.main(["-s", "in.pdf", "-d", "out.csv"])
    assert exc.value.code == 1
    assert "Error: unexpected token" in capsys.readouterr().out
