import typer

from ..db import engine as db_engine
from .asynctyper import AsyncTyper

app = AsyncTyper()


@app.callback()
def db_app_callback(ctx: typer.Context):
    """Manage the database."""


@app.async_command(name="create-tables")
async def create_tables(ctx: typer.Context):
    """Create all database tables."""
    await db_engine.create_tables(ctx.obj["engine"])
    await db_engine.dispose_engines()
    ctx.obj["main"].status_console.print("Database tables created")


@app.async_command(name="drop-tables")
async def drop_tables(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", help="Do not ask for confirmation."),
):
    """Drop all database tables, including every stored user."""
    if not yes:
        typer.confirm("This removes all stored data. Continue?", abort=True)
    await db_engine.drop_tables(ctx.obj["engine"])
    await db_engine.dispose_engines()
    ctx.obj["main"].status_console.print("Database tables dropped")
