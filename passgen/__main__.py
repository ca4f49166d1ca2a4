"""
CLI interface for passgen.
"""

import asyncio
import logging
import random
import sys
from typing import Optional

import click

from .config import (
    COPY_FEEDBACK_DELAY,
    DEFAULT_DIGITS_ENABLED,
    DEFAULT_LENGTH,
    DEFAULT_SYMBOLS_ENABLED,
    ControllerSettings,
    GeneratorConfig,
)
from .controller import GeneratorController, get_generator_controller
from .exceptions import ClipboardWriteError
from .utils.password_generator import PasswordGenerator, describe_charset
from .utils.validation import clamp_length


class GeneratorContext:
    """Context object for sharing generator options across commands."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    def build_controller(self, length: int, digits: bool, symbols: bool,
                         feedback_delay: float = COPY_FEEDBACK_DELAY) -> GeneratorController:
        """Create a controller whose defaults are the command-line options."""
        settings = ControllerSettings(
            defaults=GeneratorConfig(
                length=clamp_length(length),
                digits_enabled=digits,
                symbols_enabled=symbols,
            ),
            copy_feedback_delay=feedback_delay,
        )
        rng = random.Random(self.seed) if self.seed is not None else None
        return get_generator_controller(settings, generator=PasswordGenerator(rng=rng))


def length_options(f):
    """Options shared by every command that builds a controller."""
    f = click.option("--symbols/--no-symbols", default=DEFAULT_SYMBOLS_ENABLED,
                     help="Include symbols")(f)
    f = click.option("--digits/--no-digits", default=DEFAULT_DIGITS_ENABLED,
                     help="Include numbers")(f)
    f = click.option("--length", "-l", default=DEFAULT_LENGTH, type=int,
                     help=f"Password length (clamped to 8-32, default: {DEFAULT_LENGTH})")(f)
    return f


@click.group(context_settings={"auto_envvar_prefix": "PASSGEN"})
@click.option("--seed", type=int, default=None, help="Seed the random source (reproducible output)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, seed: Optional[int], verbose: bool) -> None:
    """passgen - Generate passwords that follow your constraints."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj = GeneratorContext(seed=seed)


@cli.command()
@length_options
@click.option("--count", "-n", default=1, type=click.IntRange(1, 100), help="How many passwords to print")
@click.option("--copy", "-c", is_flag=True, help="Copy the last password to the clipboard")
@click.pass_obj
def generate(gen_ctx: GeneratorContext, length: int, digits: bool, symbols: bool,
             count: int, copy: bool) -> None:
    """Print one or more passwords."""
    controller = gen_ctx.build_controller(length, digits, symbols)

    config = controller.config
    if config.length != length:
        click.echo(f"Length {length} clamped to {config.length}.", err=True)

    charset_desc = describe_charset(config.digits_enabled, config.symbols_enabled)
    click.echo(f"🔐 {config.length}-character passwords using: {charset_desc}", err=True)

    for i in range(count):
        if i:
            controller.regenerate()
        click.echo(controller.password)

    if copy:
        try:
            asyncio.run(controller.request_copy())
            click.echo("✅ Password copied to clipboard.", err=True)
        except ClipboardWriteError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)


@cli.command()
@length_options
@click.option("--feedback-delay", default=COPY_FEEDBACK_DELAY, type=click.FloatRange(min=0),
              help=f"Seconds before 'Copied!' reverts (default: {COPY_FEEDBACK_DELAY})")
@click.option("--light", is_flag=True, help="Start with the light theme")
@click.pass_obj
def interactive(gen_ctx: GeneratorContext, length: int, digits: bool, symbols: bool,
                feedback_delay: float, light: bool) -> None:
    """Open the interactive password generator."""
    from .ui.realtime import password_widget
    from .ui.theme import Theme, ThemeState

    controller = gen_ctx.build_controller(length, digits, symbols, feedback_delay)

    print()  # Add blank line before interface
    password_widget(controller, ThemeState(Theme.LIGHT if light else Theme.DARK))
    print()  # Add blank line after interface


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
