import uvicorn

from person_notes import main


def test_run_serves_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    main.run()
    assert len(calls) == 1
    app, kwargs = calls[0]
    assert app is main.app
    assert kwargs["host"] == main.get_settings().api_host
    assert kwargs["port"] == main.get_settings().api_port
