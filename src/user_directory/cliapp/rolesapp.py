from typing import Annotated

import typer

from .. import schemas
from ..db import (
    commands,
    stores,
)
from .asynctyper import AsyncTyper
from .common import cli_session

app = AsyncTyper()


@app.callback()
def roles_app_callback(ctx: typer.Context):
    """Manage roles and their permissions."""


@app.async_command(name="create")
async def create_role(
    ctx: typer.Context,
    name: str,
    permission: Annotated[
        list[str] | None,
        typer.Option(help="Permission granted by the role. May be repeated."),
    ] = None,
    inactive: bool = False,
):
    """Create a new role."""
    async with cli_session(ctx) as session:
        created = await commands.create_role(
            session,
            schemas.RoleCreate(
                name=name, active=not inactive, permissions=permission or []
            ),
        )
        ctx.obj["main"].status_console.print(
            schemas.RoleReadDetail.from_db_instance(created)
        )


@app.async_command(name="show")
async def show_role(ctx: typer.Context, role_id: int):
    """Show a role along with its permissions."""
    async with cli_session(ctx) as session:
        role = await stores.SqlRoleStore(session).find_one_or_fail(
            schemas.RoleCriteria(id=role_id, with_permissions=True)
        )
        ctx.obj["main"].status_console.print(
            schemas.RoleReadDetail.from_db_instance(role)
        )


@app.async_command(name="set-active")
async def set_role_active(ctx: typer.Context, role_id: int, active: bool = True):
    """Activate a role, or deactivate it with --no-active."""
    async with cli_session(ctx) as session:
        role = await stores.SqlRoleStore(session).find_one_or_fail(
            schemas.RoleCriteria(id=role_id)
        )
        updated = await commands.set_role_active(session, role, active)
        ctx.obj["main"].status_console.print(
            schemas.RoleReadListItem(**updated.model_dump())
        )
