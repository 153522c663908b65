from typing import Optional
import typer
import logging
from typing_extensions import Annotated
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from fitcoach.client.fitcoach import FitCoach
from fitcoach.domains.responses import ResponsePayload
from fitcoach.services.intent import IntentClassificationService

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()


def print_response(payload: ResponsePayload) -> None:
    """Helper function to display a coach response."""
    console.print(f"[bright_blue]Coach:[/bright_blue] {payload.content}")
    if payload.suggestions:
        console.print("[dim]Suggestions:[/dim]")
        for suggestion in payload.suggestions:
            console.print(f"  [cyan]>[/cyan] {suggestion}")
    if payload.predictions:
        console.print("[dim]You might also want:[/dim]")
        for prediction in payload.predictions:
            console.print(f"  [magenta]*[/magenta] {prediction}")


@app.command()
def chat(
    session_id: Annotated[
        str, typer.Option(help="The session ID for the conversation.")
    ] = "cli_session",
    config: Annotated[
        Optional[str], typer.Option(help="Path to a JSON or Python configuration file.")
    ] = None,
):
    """
    Start an interactive coaching session.
    Type 'exit' or 'quit' to end the session.
    """
    try:
        coach = FitCoach(config_path=config)
        console.print("[green]Coach ready. Start chatting![/green]")
        console.print("[dim]Type 'exit' or 'quit' to end.[/dim]")

    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)

    # --- Main Interaction Loop ---
    while True:
        try:
            user_message = Prompt.ask("[bold green]You[/bold green]")

            if user_message.lower() in ["exit", "quit"]:
                console.print("[yellow]Exiting chat session.[/yellow]")
                break

            if not user_message.strip():
                continue

            print_response(coach.process(session_id, user_message))

        except KeyboardInterrupt:
            console.print(
                "\n[yellow]Exiting chat session (KeyboardInterrupt).[/yellow]"
            )
            break
        except Exception as loop_error:
            console.print(
                f"[bold red]An error occurred in the chat loop:[/bold red] {loop_error}"
            )


@app.command()
def analyze(
    text: Annotated[str, typer.Argument(help="Message to analyze.")],
):
    """
    Show how a message is understood without recording anything.
    """
    analysis = IntentClassificationService().analyze(text)

    table = Table(title="Message analysis")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Primary intent", analysis.primary_intent.value)
    table.add_row(
        "Secondary intents",
        ", ".join(intent.value for intent in analysis.secondary_intents) or "-",
    )
    table.add_row(
        "Sentiment",
        f"{analysis.sentiment.label.value} "
        f"(confidence {analysis.sentiment.confidence:.2f}, "
        f"intensity {analysis.sentiment.intensity:.2f})",
    )
    table.add_row("Urgency", analysis.urgency.value)
    table.add_row("Complexity", analysis.complexity.value)
    table.add_row("Confidence", f"{analysis.confidence:.2f}")
    table.add_row(
        "Entities",
        "\n".join(
            f"{entity.kind.value}: {entity.value} ('{entity.raw_text}')"
            for entity in analysis.entities
        )
        or "-",
    )
    console.print(table)


if __name__ == "__main__":
    app()
