"""
Output destinations for generated passwords: terminal, file and clipboard.
"""

import logging
import os
from pathlib import Path
from typing import Iterable

import click
import pyperclip

from .exceptions import ClipboardUnavailableError, OutputError
from .orchestrator import GeneratedPassword, GenerationResult

logger = logging.getLogger(__name__)

OWNER_READ_WRITE = 0o600


def write_file(path: str, values: Iterable[str]) -> Path:
    """
    Write passwords to path, one per line.

    The file is created with owner-only permissions, and an existing file is
    truncated and restricted before anything is written to it.

    Raises:
        OutputError: If the file cannot be created or written
    """
    output_path = Path(path)
    try:
        fd = os.open(str(output_path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OWNER_READ_WRITE)
    except OSError as e:
        raise OutputError(f"Cannot write to output file {output_path}: {e}") from e

    try:
        # os.open only applies the mode to new files
        if hasattr(os, "fchmod"):
            os.fchmod(fd, OWNER_READ_WRITE)
        else:
            os.chmod(str(output_path), OWNER_READ_WRITE)

        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fd = -1
            for value in values:
                f.write(f"{value}\n")
    except OSError as e:
        raise OutputError(f"Cannot write to output file {output_path}: {e}") from e
    finally:
        if fd >= 0:
            os.close(fd)

    logger.info(f"Passwords written to {output_path}")
    return output_path


def copy_to_clipboard(value: str) -> None:
    """
    Copy a value to the OS clipboard.

    Raises:
        ClipboardUnavailableError: If no clipboard mechanism is available
    """
    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(f"Could not copy to clipboard: {e}") from e


def format_entry(entry: GeneratedPassword, show_strength: bool = True) -> str:
    """Render one password for the terminal, with its strength when scored."""
    if not show_strength or entry.strength is None:
        return entry.value
    return f"{entry.value}  (strength: {entry.strength.label}, score: {entry.strength.score}/100)"


class OutputSink:
    """Send a GenerationResult to every configured destination."""

    def __init__(self, result: GenerationResult):
        self.result = result
        self.config = result.config

    def render(self) -> bool:
        """
        Write the file, print to the terminal and copy to the clipboard.

        Returns:
            False if the clipboard copy failed, True otherwise

        Raises:
            OutputError: If the output file cannot be written
        """
        if self.config.output_path:
            path = write_file(self.config.output_path, self.result.values)
            click.echo(f"Saved {len(self.result.passwords)} password(s) to {path}", err=True)

        if self.config.display:
            for entry in self.result.passwords:
                click.echo(format_entry(entry, self.config.show_strength))

        if self.config.clipboard:
            try:
                copy_to_clipboard(self.result.values[0])
            except ClipboardUnavailableError as e:
                logger.debug(f"Clipboard copy failed: {e}")
                click.echo(f"Warning: {e}", err=True)
                return False
            click.echo("Password copied to clipboard.", err=True)

        return True
