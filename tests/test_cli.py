import logging

import pytest

import bouncy_ball


def test_list_presets(capsys):
    assert bouncy_ball.main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    assert "impulse.json\tImpulse" in out
    assert "classic.json\tClassic" in out


def test_headless_run_logs_final_state(caplog):
    with caplog.at_level(logging.INFO, logger="bouncy_ball"):
        assert bouncy_ball.main(["--headless", "--frames", "50", "--preset", "trail"]) == 0
    assert any("After 50 frames" in r.getMessage() for r in caplog.records)


def test_headless_no_trail():
    assert bouncy_ball.main(["--headless", "--frames", "5", "--no-trail"]) == 0


def test_unknown_preset_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        bouncy_ball.main(["--headless", "--preset", "does-not-exist"])
    assert exc.value.code == 2


def test_bad_fps_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        bouncy_ball.main(["--headless", "--fps", "0"])
    assert exc.value.code == 2


def test_headless_error_exit_status(monkeypatch):
    monkeypatch.setattr(bouncy_ball, "run_headless", lambda animation, frames: RuntimeError("boom"))
    assert bouncy_ball.main(["--headless", "--frames", "1"]) == 1
