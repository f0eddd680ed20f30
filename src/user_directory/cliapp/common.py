import contextlib
import logging
from typing import AsyncIterator

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from .. import (
    config,
    errors,
)
from ..db.engine import dispose_engines

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def cli_session(ctx: typer.Context) -> AsyncIterator[AsyncSession]:
    """Provide a database session, reporting directory errors on the console.

    Directory errors end the command with exit code 1. Other errors propagate.
    """
    context: config.UserDirectoryCliContext = ctx.obj["main"]
    try:
        async with ctx.obj["session_maker"]() as session:
            yield session
    except errors.UserDirectoryError as err:
        context.status_console.print(f"[red]Error:[/red] {err}")
        raise typer.Exit(code=1) from err
    finally:
        await dispose_engines()
