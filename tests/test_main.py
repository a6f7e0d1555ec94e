from time_service import config, main as service_main
from time_service.custom_logging import log_file_path


def test_main_logs_clock_choice_to_log_file(tmp_path, monkeypatch, bare_root_logger):
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path))
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(config, "FIXED_INSTANT", "2024-01-01T00:00:00Z")
    served = []
    monkeypatch.setattr(service_main.uvicorn, "run", lambda app, **kwargs: served.append((app, kwargs)))

    service_main.main()

    assert len(served) == 1
    app, kwargs = served[0]
    assert kwargs == {"host": config.HOST, "port": config.PORT}
    assert app.state.time_source.get_current_instant().isoformat() == "2024-01-01T00:00:00+00:00"

    text = log_file_path(str(tmp_path)).read_text()
    assert "Using fixed platform time 2024-01-01T00:00:00+00:00" in text
    assert "Platform time served from FixedClock" in text
