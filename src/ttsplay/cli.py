"""Typer CLI definition for ttsplay."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer

from .audio.player import AudioPlayer
from .config import load_config
from .core import list_available_models, list_available_voices, synthesize_text
from .tts.constants import estimate_cost
from .tts.errors import SynthesisError, ValidationError

app = typer.Typer(help="Convert text of any length to speech")


def process_text_input(text: str | None) -> str:
    """Process text input and return the text to synthesize.

    Args:
        text: Optional text input from CLI argument, file or stdin

    Returns:
        The text to synthesize

    Raises:
        ValueError: If no text is provided
    """
    if text is None:
        raise ValueError("No text provided")

    return text


def print_progress(fraction: float) -> None:
    typer.echo(f"\rGenerating... {fraction:4.0%}", err=True, nl=fraction >= 1.0)


def fail(message: str, error: Exception, debug: bool) -> NoReturn:
    if debug:
        typer.echo(f"Debug - {message}: {error!r}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command()
def speak(
    text: str | None = typer.Argument(None, help="Text to convert to speech"),
    file: Path | None = typer.Option(None, "-f", "--file", help="Read text from file"),
    output: Path | None = typer.Option(
        None, "-o", "--output", help="Save audio to file instead of playing"
    ),
    model: str | None = typer.Option(
        None, "-m", "--model", help="Model ID (from config if omitted)"
    ),
    voice: str | None = typer.Option(
        None, "-v", "--voice", help="Voice ID (from config if omitted)"
    ),
    speed: float | None = typer.Option(
        None, "-s", "--speed", help="Speaking rate 0.25-4.0 (from config if omitted)"
    ),
    api_key: str | None = typer.Option(
        None,
        "-k",
        "--api-key",
        help="API key (falls back to OPENAI_API_KEY, then the last key used)",
    ),
    estimate: bool = typer.Option(
        False, "--estimate", help="Print the estimated cost and exit"
    ),
    list_voices: bool = typer.Option(
        False, "--list-voices", help="List available voices and exit"
    ),
    list_models: bool = typer.Option(
        False, "--list-models", help="List available models and exit"
    ),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Hide progress output"),
    debug: bool = typer.Option(
        False, "--debug", help="Show verbose error messages and cache activity"
    ),
) -> None:
    """Convert text to speech, splitting long input into chunks."""
    # Configure logging for debug mode
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    config = load_config()

    if list_voices or list_models:
        try:
            if list_voices:
                for entry in asyncio.run(list_available_voices(config.tts.provider)):
                    typer.echo(f"{entry['name']}: {entry['id']}")
            if list_models:
                for entry in asyncio.run(list_available_models(config.tts.provider)):
                    typer.echo(f"{entry['name']}: {entry['id']}")
        except KeyError as e:
            fail("Unknown provider", e, debug)
        raise typer.Exit(0)

    # Get text from argument, file, or stdin (in priority order)
    if text is None:
        if file:
            try:
                text = file.read_text()
            except FileNotFoundError as e:
                if debug:
                    typer.echo(f"Debug - File not found: {file} ({e!r})", err=True)
                else:
                    typer.echo(f"Error: File not found: {file}", err=True)
                raise typer.Exit(1) from None
            except UnicodeDecodeError as e:
                if debug:
                    typer.echo(f"Debug - Decode error: {file} ({e!r})", err=True)
                else:
                    typer.echo(
                        f"Error: Unable to decode file as text: {file}", err=True
                    )
                raise typer.Exit(1) from None
        elif not sys.stdin.isatty():
            text = sys.stdin.read()

    try:
        input_text = process_text_input(text)
    except ValueError as e:
        fail("Text processing error", e, debug)

    if estimate:
        chosen_model = model or config.tts.model
        cost = estimate_cost(input_text, chosen_model)
        typer.echo(f"{len(input_text)} characters with {chosen_model}: ${cost:.4f}")
        raise typer.Exit(0)

    try:
        result = asyncio.run(
            synthesize_text(
                input_text,
                config,
                api_key=api_key,
                model=model,
                voice=voice,
                speed=speed,
                on_progress=None if quiet else print_progress,
            )
        )
    except ValidationError as e:
        fail("Validation error", e, debug)
    except SynthesisError as e:
        fail("Synthesis error", e, debug)
    except (KeyError, ValueError) as e:
        fail("Configuration error", e, debug)

    if result.cached and not quiet:
        typer.echo("Using cached audio", err=True)

    player = AudioPlayer()
    try:
        if output:
            player.save(result, output)
            typer.echo(f"Audio saved to {output}")
        else:
            player.play(result)
    except OSError as e:
        fail("File system error", e, debug)
    except RuntimeError as e:
        fail("Audio playback error", e, debug)
    except ValueError as e:
        fail("Audio error", e, debug)
