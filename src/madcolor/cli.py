"""Command-line interface for madcolor."""

import logging
import sys
from pathlib import Path

import click
import numpy as np
import pyperclip
from pyperclip import PyperclipException

from . import __version__
from .color_table import parse_color
from .colorize import colorize
from .config import (
    DEFAULT_LOG_FILE,
    DEFAULT_MAX_BRIGHTNESS,
    DEFAULT_MIN_BRIGHTNESS,
    DEFAULT_MIN_CONTRAST_PCT,
    DEFAULT_MIN_DISTANCE_PCT,
    MAX_CHANNEL_SUM,
    BrightnessRange,
    SelectionOptions,
)
from .logs import setup_logging
from .selector import ColorSelector

logger = logging.getLogger(__name__)


def read_input(text: str | None, input_file: Path | None, paste: bool = False) -> str:
    """Text to colorize: literal text, then the input file, then the clipboard,
    then stdin."""
    if text is not None:
        return text
    if input_file is not None:
        return input_file.read_text(encoding="utf-8")
    if paste:
        return pyperclip.paste()
    return click.get_text_stream("stdin").read()


def write_output(html: str, output: str | None, output_dir: Path, clip: bool = False) -> None:
    if clip:
        pyperclip.copy(html)
        logger.info("Copied colorized text to the clipboard")
    if output is None:
        click.echo(html, nl=False)
        return
    path = output_dir / output
    path.write_text(html, encoding="utf-8")
    logger.info("Wrote colorized text to %s", path)


@click.command()
@click.version_option(version=__version__, prog_name="madcolor")
@click.argument("text", required=False)
@click.option("-t", "--text", "text_option", help="Text to colorize")
@click.option(
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the text to colorize from this file",
)
@click.option("--paste", is_flag=True, help="Read the text to colorize from the clipboard")
@click.option("--clip", is_flag=True, help="Also copy the HTML to the clipboard")
@click.option("-o", "--output", type=str, help="Write the HTML to this file name")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory for --output",
)
@click.option(
    "-b",
    "--background-color",
    help="Background color: #RRGGBB, #RGB, or a color name",
)
@click.option(
    "-c",
    "--contrast",
    type=click.IntRange(0, 100),
    default=DEFAULT_MIN_CONTRAST_PCT,
    show_default=True,
    help="Minimum contrast ratio between foreground and background, in percent",
)
@click.option(
    "-D",
    "--distance",
    type=click.IntRange(0, 100),
    default=DEFAULT_MIN_DISTANCE_PCT,
    show_default=True,
    help="Minimum RGB distance between foreground and background, in percent",
)
@click.option(
    "-i",
    "--invent",
    is_flag=True,
    help="Randomly generate colors rather than pick named colors",
)
@click.option(
    "-a",
    "--anti",
    is_flag=True,
    help="Set each background to the complement of its foreground",
)
@click.option(
    "--min-brightness",
    type=click.IntRange(0, MAX_CHANNEL_SUM),
    default=DEFAULT_MIN_BRIGHTNESS,
    hidden=True,
)
@click.option(
    "--max-brightness",
    type=click.IntRange(0, MAX_CHANNEL_SUM),
    default=DEFAULT_MAX_BRIGHTNESS,
    hidden=True,
)
@click.option("--seed", type=int, help="Seed the random generator for repeatable output")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_FILE,
    show_default=True,
    help="Log file (truncated on each run)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log informational messages")
@click.option("-d", "--debug", is_flag=True, help="Log debugging messages")
@click.option("-q", "--quiet", is_flag=True, help="Log to the log file only, not stderr")
def main(
    text: str | None,
    text_option: str | None,
    input_file: Path | None,
    paste: bool,
    clip: bool,
    output: str | None,
    output_dir: Path,
    background_color: str | None,
    contrast: int,
    distance: int,
    invent: bool,
    anti: bool,
    min_brightness: int,
    max_brightness: int,
    seed: int | None,
    log_file: Path,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """Colorize text as HTML, one colored span per character.

    Foregrounds are picked from named HTML colors (or invented with -i).
    With -b every character gets a foreground that contrasts with the given
    background; with -a every character gets its own background.

    Examples:

        madcolor "Hello, world"

        madcolor -b white -c 40 -D 25 "Readable on white"

        echo "from stdin" | madcolor -i -a

        madcolor --input notes.txt -o notes.html --output-dir out

        madcolor --paste --clip -b black
    """
    setup_logging(log_file, verbose=verbose, debug=debug, quiet=quiet)

    try:
        background = None
        if background_color is not None:
            background, ok = parse_color(background_color)
            if not ok:
                logger.warning(
                    "Could not understand background color %r, using %s",
                    background_color,
                    background,
                )

        selector = ColorSelector(
            SelectionOptions(
                min_contrast_pct=contrast,
                min_distance_pct=distance,
                named_only=not invent,
            ),
            rng=np.random.default_rng(seed) if seed is not None else None,
            brightness=BrightnessRange(min_brightness, max_brightness),
        )

        source = text if text is not None else text_option
        html = colorize(read_input(source, input_file, paste), selector, background, anti)
        write_output(html, output, output_dir, clip)

    except ValueError as e:
        logger.error("%s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        logger.error("I/O failure: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except PyperclipException as e:
        logger.error("Clipboard unavailable: %s", e)
        click.echo(f"Error: clipboard unavailable: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
