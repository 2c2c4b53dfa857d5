import pytest
import uvicorn

import main
from core.config import Settings
from core.server import Server, build_server, startup_notice


@pytest.fixture
def recorded_runs(monkeypatch):
    runs = []

    def _fake_run(self, sockets=None):
        runs.append(self)

    monkeypatch.setattr(Server, "run", _fake_run)
    return runs


@pytest.fixture
def fake_bind(monkeypatch):
    """Replace uvicorn's socket binding with a successful no-op."""
    async def _startup(self, sockets=None):
        self.started = True

    monkeypatch.setattr(uvicorn.Server, "startup", _startup)


def test_start_in_test_mode_does_not_listen(recorded_runs):
    settings = Settings(_env_file=None, NODE_ENV="test", PORT=4000)

    assert main.start(settings=settings) is None
    assert recorded_runs == []


@pytest.mark.asyncio
async def test_app_remains_dispatchable_in_test_mode(recorded_runs, client):
    main.start(settings=Settings(_env_file=None, NODE_ENV="test"))

    resp = await client.get("/pets")
    assert resp.status_code == 200
    assert recorded_runs == []


@pytest.mark.parametrize("mode", [None, "development", "production", "TEST"])
def test_start_outside_test_mode_binds_configured_port(recorded_runs, mode):
    settings = Settings(_env_file=None, NODE_ENV=mode, PORT=4000)

    server = main.start(settings=settings)

    assert recorded_runs == [server]
    assert server.config.port == 4000
    assert server.config.host == "0.0.0.0"
    assert server.config.app is main.app


def test_start_uses_supplied_application(recorded_runs, app):
    server = main.start(app, Settings(_env_file=None, PORT=4000))
    assert server.config.app is app


def test_absent_port_falls_back_to_uvicorn_default(recorded_runs):
    server = main.start(settings=Settings(_env_file=None, NODE_ENV="production"))
    assert server.config.port == uvicorn.Config(main.app, log_config=None).port


@pytest.mark.asyncio
async def test_startup_prints_exactly_one_notice_with_port(fake_bind, app, capsys):
    server = build_server(app, Settings(_env_file=None, PORT=4000))

    await server.startup()

    out_lines = capsys.readouterr().out.splitlines()
    assert out_lines == [startup_notice(4000)]
    assert "4000" in out_lines[0]


@pytest.mark.asyncio
async def test_startup_reports_os_assigned_port(fake_bind, app, capsys):
    class _Sock:
        def getsockname(self):
            return ("127.0.0.1", 54321)

    class _Listener:
        sockets = [_Sock()]

    server = build_server(app, Settings(_env_file=None, PORT=0))
    server.servers = [_Listener()]

    await server.startup()

    assert capsys.readouterr().out.strip() == startup_notice(54321)


@pytest.mark.asyncio
async def test_no_notice_when_startup_did_not_complete(monkeypatch, app, capsys):
    async def _startup(self, sockets=None):
        self.started = False

    monkeypatch.setattr(uvicorn.Server, "startup", _startup)
    server = build_server(app, Settings(_env_file=None, PORT=4000))

    await server.startup()

    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_port_from_env_file_is_bound_and_announced(tmp_path, monkeypatch, recorded_runs, fake_bind, capsys):
    for key in ("NODE_ENV", "PORT"):
        monkeypatch.delenv(key, raising=False)
    env_file = tmp_path / "config.env"
    env_file.write_text("PORT=4000\n")

    server = main.start(settings=Settings(_env_file=env_file))

    assert recorded_runs == [server]
    assert server.config.port == 4000

    await server.startup()

    out_lines = capsys.readouterr().out.splitlines()
    assert len(out_lines) == 1
    assert "4000" in out_lines[0]
