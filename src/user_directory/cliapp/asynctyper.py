import asyncio
import inspect
from functools import (
    partial,
    wraps,
)

import typer


class AsyncTyper(typer.Typer):
    """A typer app whose commands may be coroutine functions."""

    @staticmethod
    def maybe_run_async(decorator, func):
        if inspect.iscoroutinefunction(func):

            @wraps(func)
            def runner(*args, **kwargs):
                return asyncio.run(func(*args, **kwargs))

            decorator(runner)
        else:
            decorator(func)
        # the undecorated coroutine function is returned so that commands can
        # still be awaited when invoked from other commands
        return func

    def async_command(self, *args, **kwargs):
        decorator = super().command(*args, **kwargs)
        return partial(self.maybe_run_async, decorator)
