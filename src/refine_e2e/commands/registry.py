"""
Command Registry
----------------

Commands are plain functions whose first parameter is the running
:class:`~refine_e2e.session.RefineSession`.  They are registered under a
name with :meth:`CommandRegistry.add` and looked up by the session when
a test calls ``refine.<name>(...)``.  Registration happens as a side
effect of importing the modules of :mod:`refine_e2e.commands`.

Example::

    from refine_e2e.commands import commands

    @commands.add()
    def assert_project_title(refine, title):
        expect(refine.page.locator("#project-name-button")).to_have_text(title)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

CommandFn = Callable[..., object]


@dataclass(frozen=True)
class Command:
    name: str
    fn: CommandFn
    # False keeps the command out of the report, like helpers that only locate
    log: bool = True

    @property
    def summary(self) -> str:
        """First line of the command's docstring."""
        doc = (self.fn.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else ""


class CommandRegistry:
    """Name to :class:`Command` mapping shared by all sessions."""

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}

    def add(self, name: Optional[str] = None, log: bool = True) -> Callable[[CommandFn], CommandFn]:
        """Decorator registering ``fn`` under ``name`` (default: the function name)."""

        def decorator(fn: CommandFn) -> CommandFn:
            self.register(Command(name or fn.__name__, fn, log))
            return fn

        return decorator

    def register(self, command: Command) -> None:
        if command.name in self._commands:
            raise ValueError(f"Command {command.name!r} is already registered")
        if command.name.startswith("_"):
            raise ValueError(f"Command names cannot start with an underscore: {command.name!r}")
        self._commands[command.name] = command

    def overwrite(self, name: str, fn: CommandFn, log: Optional[bool] = None) -> Command:
        """Replace an existing command, returning the previous one."""
        previous = self.get(name)
        self._commands[name] = Command(name, fn, previous.log if log is None else log)
        return previous

    def get(self, name: str) -> Command:
        try:
            return self._commands[name]
        except KeyError:
            raise KeyError(f"Unknown command {name!r}") from None

    def names(self) -> List[str]:
        return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


commands = CommandRegistry()

__all__ = ["Command", "CommandRegistry", "commands"]
