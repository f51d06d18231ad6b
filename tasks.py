"""Invoke tasks for testing, linting, and refreshing the photo frame.

Every task shells out to the `uv` CLI so local runs use the project's locked
environment.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from invoke import Collection, Context, task

DEFAULT_FRAME_VOLUME = "/Volumes/PHOTO FRAME"


def _run_uv(ctx: Context, args: Sequence[str], *, dry_run: bool = False) -> None:
    """Execute a uv command with consistent quoting and PTY defaults.

    Args:
        ctx: Invoke execution context.
        args: Arguments appended after the `uv` executable.
        dry_run: When True, print the command without executing it.
    """
    command = shlex.join(("uv", *args))
    if dry_run:
        print(f"[dry-run] {command}")
        return
    ctx.run(command, echo=True, pty=True)


@task
def setup(ctx: Context) -> None:
    """Synchronize the virtual environment, including development extras."""
    _run_uv(ctx, ["sync", "--extra", "dev"])


@task(
    help={
        "k": "pytest -k expression for test selection.",
        "options": "Additional CLI flags forwarded verbatim to pytest.",
    }
)
def tests(ctx: Context, k: str = "", options: str = "") -> None:
    """Run the pytest suite via uv.

    Args:
        ctx: Invoke execution context.
        k: `pytest -k` expression to select tests.
        options: Extra CLI arguments appended to the pytest call.
    """
    args: list[str] = ["run", "pytest"]
    if k:
        args.extend(["-k", k])
    if options:
        args.extend(shlex.split(options))
    _run_uv(ctx, args)


@task(help={"fix": "Apply auto-fixes where possible (ruff --fix)."})
def lint(ctx: Context, fix: bool = False) -> None:
    """Run Ruff formatting and lint checks via uv."""
    _run_uv(ctx, ["run", "ruff", "format", "--check", "src", "tests"])
    args: list[str] = ["run", "ruff", "check", "src", "tests"]
    if fix:
        args.append("--fix")
    _run_uv(ctx, args)


@task
def mypy(ctx: Context) -> None:
    """Run MyPy over the package sources."""
    _run_uv(ctx, ["run", "mypy", "src"])


@task
def ci(ctx: Context) -> None:
    """Replicate the CI workflow locally."""
    ctx.invoke(lint)
    ctx.invoke(mypy)
    ctx.invoke(tests)


@task(
    help={
        "output": "Export root that mirrors the frame contents.",
        "width": "Frame width in pixels.",
        "height": "Frame height in pixels.",
        "volume": "Mount point of the frame's storage.",
        "dry_run": "Print the commands without running them.",
    }
)
def frame(
    ctx: Context,
    output: str,
    width: int,
    height: int,
    volume: str = DEFAULT_FRAME_VOLUME,
    dry_run: bool = False,
) -> None:
    """Export new albums, then mirror the export root onto the frame.

    Args:
        ctx: Invoke execution context.
        output: Export root directory.
        width: Frame width in pixels.
        height: Frame height in pixels.
        volume: Mount point of the frame's storage.
        dry_run: Print each command without executing it.
    """
    _run_uv(
        ctx,
        ["run", "photoframe", "export", "-w", str(width), "-h", str(height), output],
        dry_run=dry_run,
    )
    _run_uv(ctx, ["run", "photoframe", "sync", output, volume], dry_run=dry_run)


namespace = Collection(setup, tests, lint, mypy, ci, frame)
