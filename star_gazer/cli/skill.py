"""CLI commands for exercising the skill locally."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from star_gazer.adapters.content import load_content_store
from star_gazer.bootstrap import build_executor
from star_gazer.core.config import settings
from star_gazer.core.exceptions import SkillError
from star_gazer.core.models import make_event, make_intent_event
from star_gazer.services import build_default_services

app = typer.Typer(name="skill", help="Inspect content and run skill requests")
console = Console()


def _parse_pairs(pairs: list[str], label: str) -> dict[str, str]:
    """Turn ``NAME=VALUE`` options into a dict."""
    parsed: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"{label} must look like NAME=VALUE: {pair!r}")
        parsed[name] = value
    return parsed


def _print_envelope(envelope: dict[str, Any] | None) -> None:
    if envelope is None:
        console.print("[dim]Session ended; no response.[/dim]")
        return
    body = envelope["response"]
    speech = body["outputSpeech"]
    console.print(f"[bold]Speech:[/bold] {speech.get('text') or speech.get('ssml', '')}")
    reprompt = body.get("reprompt")
    if reprompt:
        console.print(f"[bold]Reprompt:[/bold] {reprompt['outputSpeech'].get('text', '')}")
    card = body.get("card")
    if card:
        console.print(f"[bold]Card:[/bold] {card['title']}")
    state = "ends" if body["shouldEndSession"] else "continues"
    console.print(f"[bold]Session:[/bold] {state}")
    console.print(
        f"[bold]Attributes:[/bold] {json.dumps(envelope.get('sessionAttributes', {}))}"
    )


@app.command("constellations")
def list_constellations() -> None:
    """List every constellation the skill knows about."""
    store = load_content_store()
    names = store.names()
    if not names:
        console.print("[dim]No constellation content found.[/dim]")
        return

    table = Table(title="Constellations")
    table.add_column("Name", style="cyan")
    table.add_column("Information")
    table.add_column("Myth")
    for name in names:
        table.add_row(
            name,
            "[green]yes[/green]" if name in store.info else "[dim]no[/dim]",
            "[green]yes[/green]" if name in store.myth else "[dim]no[/dim]",
        )
    console.print(table)


@app.command("ask")
def ask(
    intent: str = typer.Argument(..., help="Intent name, e.g. ConstellationsIntent"),
    slot: list[str] = typer.Option([], "--slot", "-s", help="Slot value as NAME=VALUE"),
    attribute: list[str] = typer.Option(
        [], "--attribute", "-a", help="Session attribute as NAME=VALUE"
    ),
) -> None:
    """Run one intent request and print the response."""
    event = make_intent_event(
        intent,
        _parse_pairs(slot, "--slot"),
        attributes=_parse_pairs(attribute, "--attribute"),
        application_id=settings.STAR_GAZER_APP_ID,
    )
    _run(event)


@app.command("launch")
def launch() -> None:
    """Run a launch request and print the welcome response."""
    _run(
        make_event(
            {"type": "LaunchRequest"}, new=True, application_id=settings.STAR_GAZER_APP_ID
        )
    )


def _run(event: dict[str, Any]) -> None:
    executor = build_executor(build_default_services(content_port=load_content_store()))
    try:
        envelope = executor.execute(event)
    except SkillError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    _print_envelope(envelope)


__all__ = ["app"]
