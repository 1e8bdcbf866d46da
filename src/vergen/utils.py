"""Core utility functions: logging and command execution with a kill timer."""

import subprocess
import threading

from rich.console import Console

from vergen.config import DEFAULT_TIMEOUT

# stderr keeps stdout free for callers that capture the tool's output
console = Console(stderr=True)


def log(message: str, style: str = "") -> None:
    """Write a message to the console, with optional rich style."""
    if style:
        console.print(message, style=style)
    else:
        console.print(message)


class CommandError(Exception):
    """An external command failed, timed out, or could not be started.

    When the process could not be spawned, the underlying OSError is
    available as __cause__.
    """

    def __init__(
        self,
        args: list[str],
        message: str,
        output: str = "",
        returncode: int | None = None,
        timed_out: bool = False,
    ) -> None:
        super().__init__(f"Could not run '{' '.join(args)}': {message}")
        self.command = list(args)
        self.output = output
        self.returncode = returncode
        self.timed_out = timed_out


def run_command(args: list[str], timeout: float = DEFAULT_TIMEOUT) -> str:
    """Run a command and return its combined stdout/stderr, stripped.

    A timer kills the process if it runs longer than *timeout* seconds.
    Raises CommandError on spawn failure, non-zero exit, or timeout.
    """
    try:
        proc = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as exc:
        raise CommandError(args, str(exc)) from exc

    killed = threading.Event()

    def _kill() -> None:
        killed.set()
        try:
            proc.kill()
        except OSError:
            pass  # already exited

    timer = threading.Timer(timeout, _kill)
    timer.start()
    try:
        raw, _ = proc.communicate()
    finally:
        timer.cancel()

    output = raw.decode("utf-8", errors="replace").strip()

    if killed.is_set():
        raise CommandError(
            args,
            f"killed after {timeout}s timeout",
            output=output,
            returncode=proc.returncode,
            timed_out=True,
        )
    if proc.returncode != 0:
        detail = f"exit status {proc.returncode}"
        if output:
            detail += f": {output}"
        raise CommandError(args, detail, output=output, returncode=proc.returncode)
    return output
