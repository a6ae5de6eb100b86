from flask import Flask

from hrms.__main__ import main


def test_startup_urls_are_logged_even_at_warning_level(monkeypatch, caplog):
    # the testing settings run with LOG_LEVEL=WARNING
    monkeypatch.setenv("APP_ENV", "testing")
    runs = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: runs.append(kwargs))

    main()

    messages = [r.getMessage() for r in caplog.records if r.name == "hrms.server"]
    assert "HRMS Server running on http://localhost:3000" in messages
    assert "API endpoints available at http://localhost:3000/api" in messages
    assert runs[0]["port"] == 3000
