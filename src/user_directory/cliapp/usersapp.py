from typing import Annotated

import typer

from .. import (
    constants,
    operations,
    schemas,
)
from .asynctyper import AsyncTyper
from .common import cli_session

app = AsyncTyper()


@app.callback()
def users_app_callback(ctx: typer.Context):
    """Manage user accounts."""


@app.async_command(name="create")
async def create_user(
    ctx: typer.Context,
    name: str,
    email: str,
    password: Annotated[
        str,
        typer.Option(prompt=True, hide_input=True, confirmation_prompt=True),
    ],
):
    """Create a new user account."""
    to_create = schemas.UserCreate(name=name, email=email, password=password)
    async with cli_session(ctx) as session:
        service = operations.get_user_directory_service(
            session, ctx.obj["main"].settings
        )
        created = await service.create_account(to_create)
        ctx.obj["main"].status_console.print(
            schemas.UserReadListItem.from_db_instance(created)
        )


@app.async_command(name="list")
async def list_users(
    ctx: typer.Context,
    inactive: bool = typer.Option(False, help="List deactivated users instead."),
    search: str | None = typer.Option(None, help="Case-insensitive name filter."),
    sort_key: constants.UserSortKey = constants.UserSortKey.ID,
    sort_order: constants.SortOrder = constants.SortOrder.ASCENDING,
    page: int = 1,
    page_size: int | None = None,
):
    """List user accounts."""
    settings = ctx.obj["main"].settings
    printer = ctx.obj["main"].status_console.print
    async with cli_session(ctx) as session:
        service = operations.get_user_directory_service(session, settings)
        users_page = await service.list_users(
            schemas.UserListQuery(
                active=not inactive,
                search=search,
                sort_key=sort_key,
                sort_order=sort_order,
            ),
            schemas.PaginationOptions(
                page=page, page_size=page_size or settings.pagination_page_size
            ),
        )
    printer(
        f"Page {users_page.page} of {users_page.total_pages} - "
        f"total records: {users_page.total}"
    )
    for item in users_page.map(schemas.UserReadListItem.from_db_instance).items:
        printer(item)


@app.async_command(name="show")
async def show_user(
    ctx: typer.Context,
    user_id: int,
    inactive: bool = typer.Option(False, help="Look among deactivated users."),
):
    """Show a single user account."""
    async with cli_session(ctx) as session:
        service = operations.get_user_directory_service(
            session, ctx.obj["main"].settings
        )
        user = await service.get_one(
            schemas.UserId(user_id), schemas.UserListQuery(active=not inactive)
        )
        ctx.obj["main"].status_console.print(
            schemas.UserReadListItem.from_db_instance(user)
        )


@app.async_command(name="find-by-email")
async def find_user_by_email(ctx: typer.Context, email: str):
    """Show the active user with the given email, including its permissions."""
    async with cli_session(ctx) as session:
        service = operations.get_user_directory_service(
            session, ctx.obj["main"].settings
        )
        user = await service.find_active_by_email(email)
        if user is None:
            ctx.obj["main"].status_console.print(f"No active user with email {email!r}")
        else:
            ctx.obj["main"].status_console.print(
                schemas.UserReadDetail.from_db_instance(user)
            )


@app.async_command(name="set-role")
async def set_user_role(ctx: typer.Context, user_id: int, role_id: int):
    """Assign an active role to an active user."""
    async with cli_session(ctx) as session:
        service = operations.get_user_directory_service(
            session, ctx.obj["main"].settings
        )
        updated = await service.update_role(
            schemas.UserId(user_id), schemas.UserRoleUpdate(role=role_id)
        )
        ctx.obj["main"].status_console.print(
            schemas.UserReadListItem.from_db_instance(updated)
        )


@app.async_command(name="remove")
async def remove_user(ctx: typer.Context, user_id: int):
    """Deactivate a user account. The record itself is kept."""
    async with cli_session(ctx) as session:
        service = operations.get_user_directory_service(
            session, ctx.obj["main"].settings
        )
        removed = await service.remove_one(schemas.UserId(user_id))
        ctx.obj["main"].status_console.print(
            schemas.UserReadListItem.from_db_instance(removed)
        )
