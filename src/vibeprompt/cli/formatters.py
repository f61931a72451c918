"""Output formatting utilities built on rich."""

import json
import sys
from typing import Any, Optional

from rich.console import Console
from rich.json import JSON
from rich.markdown import Markdown
from rich.panel import Panel
from rich.status import Status
from rich.table import Table

from vibeprompt.schemas.catalog import TechOptionCatalog
from vibeprompt.schemas.project import REQUIREMENT_LABELS, ProjectAnswer, RequirementFlag
from vibeprompt.wizard.state import STEP_TITLES, WizardStep


class OutputFormatter:
    """Formats wizard output for the terminal."""

    def __init__(self, force_color: bool = False, console: Optional[Console] = None):
        """Initialize formatter."""
        self.console = console or Console(force_terminal=force_color or None, file=sys.stdout)
        self.err_console = Console(stderr=True)

    def status(self, message: str) -> Status:
        """Spinner shown while requests are outstanding."""
        return self.console.status(f"[dim]{message}[/dim]", spinner="dots")

    def print_json(self, data: Any, indent: int = 2) -> None:
        """Print JSON with syntax highlighting."""
        self.console.print(JSON(json.dumps(data, indent=indent, ensure_ascii=False)))

    def print_markdown(self, text: str) -> None:
        """Print markdown with rich rendering."""
        self.console.print(Markdown(text))

    def print_panel(self, title: str, text: str, style: str = "cyan") -> None:
        """Print AI output in a titled panel."""
        self.console.print(Panel(Markdown(text), title=title, border_style=style))

    def print_step_header(self, step: WizardStep) -> None:
        total = len(WizardStep)
        self.console.print()
        self.console.rule(f"[bold cyan]Step {step.value + 1}/{total}: {STEP_TITLES[step]}[/bold cyan]")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str) -> None:
        """Print error message."""
        self.err_console.print(f"[red]✗[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def print_numbered(self, title: str, items: list[str]) -> None:
        if not items:
            return
        self.console.print(f"[bold]{title}[/bold]")
        for i, item in enumerate(items, 1):
            self.console.print(f"  [cyan]{i:>2}.[/cyan] {item}")

    def print_catalog(self, catalog: TechOptionCatalog, selected: Optional[dict[str, str]] = None) -> None:
        """Print one table per technology category."""
        selected = selected or {}
        for name, category in catalog.categories():
            table = Table(
                title=f"{category.title}",
                caption=category.description,
                show_header=True,
                header_style="bold magenta",
            )
            table.add_column("Value", style="cyan")
            table.add_column("Option", style="bold")
            table.add_column("Description")
            table.add_column("Pros", style="green")
            table.add_column("Difficulty")

            for option in category.options:
                marker = "● " if selected.get(name) == option.value else ""
                table.add_row(
                    f"{marker}{option.value}",
                    option.label,
                    option.description,
                    ", ".join(option.pros),
                    option.difficulty.value,
                )
            self.console.print(table)

    def print_requirements(self, answer: ProjectAnswer) -> None:
        selected = answer.professional_requirements.selected_count()
        table = Table(
            title=f"Professional Requirements ({selected} selected)",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("#", style="cyan")
        table.add_column("Requirement")
        table.add_column("Enabled")
        for i, flag in enumerate(RequirementFlag, 1):
            enabled = answer.professional_requirements.is_enabled(flag)
            table.add_row(str(i), REQUIREMENT_LABELS[flag], "[green]yes[/green]" if enabled else "no")
        self.console.print(table)

    def print_summary(self, answer: ProjectAnswer) -> None:
        """Print the collected answers before generation."""
        table = Table(title="Project Summary", show_header=True, header_style="bold magenta")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        stack = answer.tech_stack
        table.add_row("Project Type", answer.project_type)
        table.add_row("Name", answer.project_name)
        table.add_row("Target Audience", answer.target_audience)
        table.add_row("Core Features", ", ".join(answer.core_features))
        table.add_row(
            "Tech Stack",
            " / ".join(v for v in (stack.frontend, stack.backend, stack.database, stack.hosting) if v),
        )
        table.add_row("Testing", answer.testing.approach)
        table.add_row(
            "Requirements",
            ", ".join(REQUIREMENT_LABELS[f] for f in answer.professional_requirements.enabled_flags()),
        )
        table.add_row("Additional", "; ".join(answer.additional_requirements))
        self.console.print(table)
