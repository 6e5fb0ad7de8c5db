"""Command-line interface for Tasklist.

This module provides the CLI commands for running and managing
the Tasklist application.
"""

import asyncio
from typing import NoReturn

import click

from tasklist import __version__
from tasklist.core.config import get_settings
from tasklist.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="Tasklist")
def cli() -> None:
    """Tasklist - task list API with token sessions.

    Settings are read from TASKLIST_* environment variables and .env.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Tasklist server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Tasklist server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "tasklist.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Create all database tables.

    Use this only in development. In production, use `tasklist migrate`.
    """
    from tasklist.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default="alembic.ini",
    show_default=True,
    help="Path to the Alembic configuration file",
)
@click.option(
    "--revision",
    type=str,
    default="head",
    show_default=True,
    help="Target revision",
)
def migrate(config_path: str, revision: str) -> None:
    """Apply database migrations."""
    from alembic import command
    from alembic.config import Config

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    alembic_config = Config(config_path)
    alembic_config.set_main_option("sqlalchemy.url", settings.database_url)

    logger.info("Applying migrations", revision=revision)
    command.upgrade(alembic_config, revision)
    click.echo(f"Database upgraded to {revision}.")


@cli.command()
def prune_sessions() -> None:
    """Delete every expired refresh-token session."""
    import time

    from tasklist.infrastructure.persistence.database import get_db_manager
    from tasklist.infrastructure.persistence.repositories import SessionRepository

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    async def prune() -> int:
        db = get_db_manager()
        try:
            async with db.session() as session:
                deleted = await SessionRepository(session).delete_expired(time.time())
                await session.commit()
            return deleted
        finally:
            await db.disconnect()

    deleted = asyncio.run(prune())
    logger.info("Expired sessions pruned", count=deleted)
    click.echo(f"Deleted {deleted} expired session(s).")


@cli.command()
def info() -> None:
    """Display Tasklist configuration."""
    settings = get_settings()

    click.echo(f"""
Tasklist v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Security:
  Token Expire: {settings.access_token_expire_minutes} minutes
  Refresh Exp:  {settings.refresh_token_expire_days} days
  Hash Cost:    {settings.password_hash_cost}
  Prune Expired Sessions: {settings.prune_expired_sessions}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `tasklist` command is run
    or when using `python -m tasklist`.
    """
    cli()


if __name__ == "__main__":
    main()
