"""Entry point for running ttsplay as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the ttsplay CLI application."""
    app()


if __name__ == "__main__":
    main()
