"""
CLI interface for passgen.
"""

import logging
import sys
from typing import Optional

import click

from . import __version__
from .config import (
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    DEFAULT_WORDLIST,
    Mode,
    StrengthLevel,
    build_config,
)
from .exceptions import ConfigurationError, OutputError
from .orchestrator import RetryOrchestrator
from .output import OutputSink
from .utils.log import configure_logging

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--length", "-l", type=click.IntRange(min=1), default=None,
              help="Password length (default: 16, or 4 for pin mode)")
@click.option("--count", "-c", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of passwords to generate")
@click.option("--mode", "-m", type=click.Choice([mode.value for mode in Mode]),
              default=Mode.RANDOM.value, show_default=True, help="Generation strategy")
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False),
              help="Write passwords to a file readable only by you")
@click.option("--clipboard", is_flag=True, help="Copy the password to the clipboard (single password only)")
@click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters")
@click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters")
@click.option("--no-numbers", is_flag=True, help="Exclude digits")
@click.option("--no-symbols", is_flag=True, help="Exclude symbols")
@click.option("--exclude-ambiguous", is_flag=True, help="Exclude brackets and punctuation such as {}[]()/<>,;:.|\\")
@click.option("--exclude-similar", is_flag=True, help="Exclude look-alike characters (iIl1Lo0O)")
@click.option("--exclude-chars", default="", metavar="CHARS", help="Exclude every character in CHARS")
@click.option("--force-special", is_flag=True, help="Include at least one character of every enabled class")
@click.option("--words", "word_count", type=click.IntRange(min=1), default=DEFAULT_WORD_COUNT,
              show_default=True, help="Number of words (passphrase mode)")
@click.option("--separator", default=DEFAULT_SEPARATOR, show_default=True,
              help="Word separator (passphrase mode)")
@click.option("--wordlist", type=click.Path(dir_okay=False),
              help=f"Word list file (passphrase mode, default: {DEFAULT_WORDLIST})")
@click.option("--no-strength", is_flag=True, help="Do not show strength scores")
@click.option("--min-strength", type=click.Choice(StrengthLevel.labels()),
              default=StrengthLevel.STRONG.label, show_default=True,
              help="Regenerate until this strength is reached (random and memorable modes)")
@click.option("--no-display", is_flag=True, help="Do not print passwords (needs --output or --clipboard)")
@click.option("--log", "log_file", type=click.Path(dir_okay=False), help="Append diagnostic logs to a file")
@click.option("--verbose", "-v", is_flag=True, help="Show progress information on stderr")
@click.version_option(__version__, prog_name="passgen")
def cli(length: Optional[int], count: int, mode: str, output_path: Optional[str],
        clipboard: bool, no_uppercase: bool, no_lowercase: bool, no_numbers: bool,
        no_symbols: bool, exclude_ambiguous: bool, exclude_similar: bool,
        exclude_chars: str, force_special: bool, word_count: int, separator: str,
        wordlist: Optional[str], no_strength: bool, min_strength: str,
        no_display: bool, log_file: Optional[str], verbose: bool) -> None:
    """passgen - generate strong passwords, memorable passwords, PINs and passphrases."""
    try:
        configure_logging(verbose=verbose, log_file=log_file)
    except OSError as e:
        click.echo(f"Error: Cannot write to log file {log_file}: {e}", err=True)
        sys.exit(1)

    logger.info("Starting password generation")

    try:
        config = build_config(
            length=length,
            mode=mode,
            min_strength=min_strength,
            count=count,
            use_uppercase=not no_uppercase,
            use_lowercase=not no_lowercase,
            use_digits=not no_numbers,
            use_symbols=not no_symbols,
            exclude_ambiguous=exclude_ambiguous,
            exclude_similar=exclude_similar,
            exclude_chars=exclude_chars,
            force_all_classes=force_special,
            word_count=word_count,
            separator=separator,
            wordlist=wordlist,
            show_strength=not no_strength,
            display=not no_display,
            output_path=output_path,
            clipboard=clipboard,
        )
        result = RetryOrchestrator(config).run()
    except ConfigurationError as e:
        logger.debug(f"Invalid configuration: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        OutputSink(result).render()
    except OutputError as e:
        logger.debug(f"Output failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info("Password generation completed successfully")


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix="PASSGEN")


if __name__ == "__main__":
    main()
