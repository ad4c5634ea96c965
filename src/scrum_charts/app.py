"""Interactive CLI dashboard."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from scrum_charts.charts import CHART_GUIDANCE
from scrum_charts.config import DEFAULT_EXPORT_FILENAME, LOG_LEVEL, MAX_SPRINT_DAYS, MIN_SPRINT_DAYS
from scrum_charts.dashboard import get_status_color, get_status_label
from scrum_charts.exporter import export_csv
from scrum_charts.importer import EXAMPLE_GRID, ParseError, import_file, parse_grid
from scrum_charts.models import ChartMode, SprintState
from scrum_charts.sprint import (
    apply_import, chart_series, evaluate, new_state, regenerate, set_mode, update_config,
)

console = Console()

BAR_WIDTH = 20


def show_welcome():
    console.print(Panel(
        "[bold]Configurable Scrum Charts[/bold]\n"
        "[dim]Sprint tracking with spreadsheet import and progress evaluation[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("dashboard", "Progress evaluation"),
        ("chart", "Burndown / burnup series"),
        ("mode", "Switch chart type"),
        ("config", "Set total scope and sprint days"),
        ("paste", "Paste rows from a spreadsheet"),
        ("import", "Import a .tsv, .csv or .xlsx file"),
        ("example", "Show the example grid"),
        ("export", "Export data to CSV"),
        ("data", "Show daily data"),
        ("regenerate", "New placeholder data"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def fmt(value) -> str:
    if value is None:
        return "n/a"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def make_bar(value: float, total: float, color: str) -> str:
    filled = 0 if total <= 0 else int(max(0, min(value, total)) / total * BAR_WIDTH)
    return f"[{color}]{'█' * filled}{'░' * (BAR_WIDTH - filled)}[/{color}]"


def ask_number(prompt: str, current: float):
    """Ask for a number; returns None (and says so) when the input is not one."""
    raw = Prompt.ask(prompt, default=fmt(current)).strip()
    try:
        return float(raw)
    except ValueError:
        console.print(f"[red]Not a number: {raw}[/red]")
        return None


def cmd_dashboard(state: SprintState) -> SprintState:
    evaluation = evaluate(state)
    color = get_status_color(evaluation.status)
    config = state.config
    console.print(Panel(
        f"[bold]{fmt(config.total_scope)} points over {config.sprint_days} days[/bold]",
        title="Progress Evaluation", border_style=color,
    ))
    console.print(f"\n  Velocity: [bold]{fmt(evaluation.velocity)}[/bold] points/day  |  "
                  f"Efficiency: [bold]{evaluation.efficiency}%[/bold]  |  "
                  f"Days to complete: [bold]{fmt(evaluation.projected_completion)}[/bold]  |  "
                  f"Status: [{color}]{get_status_label(evaluation.status)}[/{color}]")
    console.print(f"\n  {evaluation.message}")
    console.print("\n[bold]Recommendations:[/bold]")
    for rec in evaluation.recommendations:
        console.print(f"  • {rec}")
    return state


def cmd_chart(state: SprintState) -> SprintState:
    guidance = CHART_GUIDANCE[state.mode]
    points = chart_series(state)
    scope = state.config.total_scope
    table = Table(title=f"{guidance['title']} [dim]({guidance['subtitle']})[/dim]")
    table.add_column("Day", style="cyan")
    table.add_column("Actual", justify="right")
    table.add_column("Planned", justify="right")
    table.add_column("Ideal", justify="right")
    if state.mode == ChartMode.BURNUP:
        table.add_column("Sprint Goal", justify="right")
    table.add_column("")
    for p in points:
        row = [p.label, fmt(p.actual), fmt(p.planned), fmt(p.ideal)]
        if state.mode == ChartMode.BURNUP:
            row.append(fmt(p.goal))
        # Red when actual is worse than ideal for the current mode
        behind = p.actual > p.ideal if state.mode == ChartMode.BURNDOWN else p.actual < p.ideal
        row.append(make_bar(p.actual, scope, "red" if behind else "green"))
        table.add_row(*row)
    console.print(table)

    console.print(f"\n{guidance['summary']}")
    for signal, meaning in guidance["signals"]:
        console.print(f"  [bold]{signal}:[/bold] {meaning}")
    console.print(f"[bold]Goal:[/bold] {guidance['goal']}")
    return state


def cmd_mode(state: SprintState) -> SprintState:
    mode = Prompt.ask(
        "Chart type", choices=[m.value for m in ChartMode], default=state.mode.value,
    )
    state = set_mode(state, ChartMode(mode))
    console.print(f"[green]Showing {CHART_GUIDANCE[state.mode]['title']}[/green]")
    return state


def cmd_config(state: SprintState) -> SprintState:
    console.print("[dim]Changing the configuration replaces current data with placeholder data.[/dim]")
    scope = ask_number("Total scope (story points)", state.config.total_scope)
    if scope is None:
        return state
    days = ask_number(f"Sprint days ({MIN_SPRINT_DAYS}-{MAX_SPRINT_DAYS})", state.config.sprint_days)
    if days is None:
        return state
    state = update_config(state, total_scope=scope, sprint_days=int(days))
    console.print(f"[green]Sprint set to {fmt(state.config.total_scope)} points "
                  f"over {state.config.sprint_days} days.[/green]")
    return state


def load_samples(state: SprintState, samples) -> SprintState:
    state = apply_import(state, samples)
    console.print(f"[green]Imported {len(samples)} rows. Sprint is now "
                  f"{fmt(state.config.total_scope)} points over {state.config.sprint_days} days.[/green]")
    return state


def cmd_paste(state: SprintState) -> SprintState:
    console.print("Paste rows (Day [TAB] Planned [TAB] Made). Finish with an empty line.")
    lines = []
    while True:
        # Prompt.ask strips answers, which would drop empty leading/trailing cells
        line = console.input("")
        if not line.strip():
            break
        lines.append(line)
    try:
        samples = parse_grid("\n".join(lines))
    except ParseError as e:
        console.print(f"[red]{e}[/red]")
        return state
    return load_samples(state, samples)


def cmd_import(state: SprintState) -> SprintState:
    file_path = Prompt.ask("File path")
    if not Path(file_path).exists():
        console.print(f"[red]File not found: {file_path}[/red]")
        return state
    try:
        samples = import_file(file_path)
    except ParseError as e:
        console.print(f"[red]{e}[/red]")
        return state
    return load_samples(state, samples)


def cmd_example(state: SprintState) -> SprintState:
    console.print(Panel(EXAMPLE_GRID.expandtabs(10), title="Example data", border_style="cyan"))
    console.print("[dim]Copy it into a spreadsheet, edit it, then use 'paste' or 'import'.[/dim]")
    if Prompt.ask("Load it now?", choices=["y", "n"], default="n") == "y":
        state = load_samples(state, parse_grid(EXAMPLE_GRID))
    return state


def cmd_export(state: SprintState) -> SprintState:
    file_path = Prompt.ask("Export to", default=DEFAULT_EXPORT_FILENAME)
    path = export_csv(state.samples, file_path)
    console.print(f"[green]Exported {len(state.samples)} rows to {path}[/green]")
    return state


def cmd_data(state: SprintState) -> SprintState:
    table = Table(title="Daily Data")
    table.add_column("Day", style="cyan")
    table.add_column("Planned", justify="right")
    table.add_column("Made", justify="right")
    for s in state.samples:
        table.add_row(s.label, fmt(s.planned_score), fmt(s.made_score))
    console.print(table)
    return state


def cmd_regenerate(state: SprintState) -> SprintState:
    state = regenerate(state)
    console.print("[green]Placeholder data regenerated.[/green]")
    return state


COMMANDS = {
    "dashboard": cmd_dashboard,
    "chart": cmd_chart,
    "mode": cmd_mode,
    "config": cmd_config,
    "paste": cmd_paste,
    "import": cmd_import,
    "example": cmd_example,
    "export": cmd_export,
    "data": cmd_data,
    "regenerate": cmd_regenerate,
}


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main():
    setup_logging()
    state = new_state()
    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="dashboard").strip().lower()
        try:
            if choice in ("quit", "exit", "q"):
                console.print("[dim]Good luck with the sprint![/dim]")
                break
            command = COMMANDS.get(choice)
            if command is None:
                console.print("[red]Unknown command. Try again.[/red]")
                continue
            state = command(state)
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
