import logging

import typer

from .. import config
from ..db.engine import (
    get_engine,
    get_session_maker,
)
from .dbapp import app as db_app
from .rolesapp import app as roles_app
from .usersapp import app as users_app

logger = logging.getLogger(__name__)
app = typer.Typer()
app.add_typer(db_app, name="db")
app.add_typer(roles_app, name="roles")
app.add_typer(users_app, name="users")


@app.callback()
def base_callback(ctx: typer.Context) -> None:
    """user-directory command line interface"""
    context = config.get_cli_context()
    config.configure_logging(
        rich_console=context.status_console,
        debug=context.settings.debug,
        log_config_file=context.settings.log_config_file,
    )
    engine = get_engine(
        context.settings.database_dsn.unicode_string(), debug=context.settings.debug
    )
    ctx.obj = {
        "main": context,
        "engine": engine,
        "session_maker": get_session_maker(engine),
    }
