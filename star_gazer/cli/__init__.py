"""CLI commands for star-gazer."""

import typer

from star_gazer.cli.skill import app as skill_app

main_app = typer.Typer(
    name="star-gazer",
    help="Star Gazer skill CLI",
    no_args_is_help=True,
)
main_app.add_typer(skill_app, name="skill")


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
