"""A tiny command shell that keeps a current directory and answers in text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

ROOT = "/"

_LISTING = ("..", "documents/", "system/", "temp/", "readme.txt")
_README = (
    "Welcome to SCos!\n"
    "This is a simple operating system.\n"
    "Type 'help' for available commands."
)


@dataclass(frozen=True)
class CommandResult:
    """Whether a command succeeded, and the text it produced."""

    ok: bool
    output: str


def parse_command(text: str) -> tuple[str, str]:
    """Split input into the command word and the rest of the line."""
    command, sep, rest = text.partition(" ")
    if not sep:
        return command, ""
    return command, rest.lstrip(" ")


class Shell:
    """Runs shell commands against a current working directory."""

    def __init__(self) -> None:
        self._cwd = ROOT
        self._commands: dict[str, Callable[[str], CommandResult]] = {
            "ls": self._ls,
            "cd": self._cd,
            "pwd": self._pwd,
            "mkdir": self._mkdir,
            "touch": self._touch,
            "cat": self._cat,
            "rm": self._rm,
            "cp": self._cp,
            "mv": self._mv,
            "find": self._find,
        }

    @property
    def current_directory(self) -> str:
        """The shell's working directory."""
        return self._cwd

    def execute_command(self, cmd: str) -> CommandResult:
        """Run one command line and report its result."""
        if not cmd:
            return CommandResult(True, "")
        command, args = parse_command(cmd)
        handler = self._commands.get(command)
        if handler is None:
            return CommandResult(False, f"Command not found: {command}")
        return handler(args)

    def _ls(self, args: str) -> CommandResult:
        path = args or self._cwd
        lines = [f"Files in {path}:", *_LISTING]
        return CommandResult(True, "\n".join(lines) + "\n")

    def _cd(self, args: str) -> CommandResult:
        if not args:
            self._cwd = ROOT
            return CommandResult(True, "Changed to root directory")
        if args == "..":
            if self._cwd != ROOT:
                cut = self._cwd.rfind("/")
                self._cwd = self._cwd[:cut] if cut > 0 else ROOT
        elif args.startswith("/"):
            self._cwd = args
        else:
            base = self._cwd if self._cwd.endswith("/") else self._cwd + "/"
            self._cwd = base + args
        return CommandResult(True, f"Changed to {self._cwd}")

    def _pwd(self, args: str) -> CommandResult:
        return CommandResult(True, self._cwd)

    @staticmethod
    def _needs_arg(args: str, usage: str, message: str) -> CommandResult:
        if not args:
            return CommandResult(False, f"Usage: {usage}")
        return CommandResult(True, message)

    def _mkdir(self, args: str) -> CommandResult:
        return self._needs_arg(args, "mkdir <directory>", f"Created directory: {args}")

    def _touch(self, args: str) -> CommandResult:
        return self._needs_arg(args, "touch <filename>", f"Created file: {args}")

    def _rm(self, args: str) -> CommandResult:
        return self._needs_arg(args, "rm <filename>", f"Removed: {args}")

    def _find(self, args: str) -> CommandResult:
        return self._needs_arg(
            args, "find <pattern>", f"Searching for: {args}\nFound: readme.txt"
        )

    def _cat(self, args: str) -> CommandResult:
        if not args:
            return CommandResult(False, "Usage: cat <filename>")
        if args == "readme.txt":
            return CommandResult(True, _README)
        return CommandResult(False, f"File not found: {args}")

    @staticmethod
    def _two_paths(args: str) -> tuple[str, str] | None:
        words = args.split()
        if len(words) < 2:
            return None
        return words[0], words[1]

    def _cp(self, args: str) -> CommandResult:
        paths = self._two_paths(args)
        if paths is None:
            return CommandResult(False, "Usage: cp <source> <destination>")
        return CommandResult(True, f"Copied {paths[0]} to {paths[1]}")

    def _mv(self, args: str) -> CommandResult:
        paths = self._two_paths(args)
        if paths is None:
            return CommandResult(False, "Usage: mv <source> <destination>")
        return CommandResult(True, f"Moved {paths[0]} to {paths[1]}")