from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from tasklist.cli import cli


def _mock_settings(**overrides) -> MagicMock:
    settings = MagicMock()
    settings.host = "0.0.0.0"
    settings.port = 3000
    settings.workers = 1
    settings.environment = "development"
    settings.is_production = False
    settings.is_development = True
    settings.log_level = "INFO"
    settings.database_url = "sqlite+aiosqlite:///./data/tasklist.db"
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "Tasklist" in result.output


def test_info():
    result = CliRunner().invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "Token Expire: 15 minutes" in result.output
    assert "Refresh Exp:  10 days" in result.output


def test_serve_runs_uvicorn():
    with patch("tasklist.cli.get_settings", return_value=_mock_settings()), \
         patch("tasklist.cli.configure_logging"), \
         patch("uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "4000"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] == "tasklist.infrastructure.api.app:app"
    assert mock_run.call_args.kwargs["port"] == 4000


def test_init_db_refuses_in_production():
    with patch("tasklist.cli.get_settings", return_value=_mock_settings(is_production=True)), \
         patch("tasklist.cli.configure_logging"):
        result = CliRunner().invoke(cli, ["init-db"])

    assert result.exit_code == 1
    assert "Use migrations instead" in result.output


def test_prune_sessions():
    session = AsyncMock()
    db = MagicMock()
    db.session.return_value.__aenter__.return_value = session
    db.disconnect = AsyncMock()

    repo = MagicMock()
    repo.delete_expired = AsyncMock(return_value=3)

    with patch("tasklist.cli.configure_logging"), \
         patch("tasklist.infrastructure.persistence.database.get_db_manager", return_value=db), \
         patch("tasklist.infrastructure.persistence.repositories.SessionRepository", return_value=repo):
        result = CliRunner().invoke(cli, ["prune-sessions"])

    assert result.exit_code == 0, result.output
    assert "Deleted 3 expired session(s)." in result.output
    session.commit.assert_awaited_once()
    db.disconnect.assert_awaited_once()
