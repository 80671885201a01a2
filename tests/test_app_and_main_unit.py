import logging

import main as entry
from backend.app import logging_config


def test_main_entry_runs_server(monkeypatch) -> None:
    called = {}

    def fake_run(app, **kwargs):
        called["app"] = app
        called.update(kwargs)

    monkeypatch.setattr(entry.uvicorn, "run", fake_run)
    monkeypatch.setattr(entry, "setup_logging", lambda level: None)
    entry.main()

    assert called["app"] == "backend.app.main:app"
    assert called["host"] == entry.config.HOST
    assert called["port"] == entry.config.PORT


def test_structured_formatter() -> None:
    record = logging.LogRecord("solver.engine", logging.INFO, __file__, 1,
                               "solved %s", ("2x+3=5",), None)
    line = logging_config.StructuredFormatter().format(record)
    assert line.endswith("[INFO] solver.engine: solved 2x+3=5")


def test_setup_logging_configures_root() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        logger = logging_config.setup_logging("debug")
        assert logger is root
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, logging_config.StructuredFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
