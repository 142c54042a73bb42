import pytest

from numberone.app import main


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_main_without_records_file(tmp_path, capsys, headless):
    assert main(["--assets", str(tmp_path)]) == 0
    assert "Could not load words list" in capsys.readouterr().out


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as raised:
        main(["--help"])
    assert raised.value.code == 0
    assert "--assets" in capsys.readouterr().out


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as raised:
        main(["--bogus"])
    assert raised.value.code == 2