"""Interactive wizard prompts."""

import os

import click

from vibeprompt.cli.formatters import OutputFormatter
from vibeprompt.schemas.catalog import TECH_CATEGORIES
from vibeprompt.schemas.project import (
    PROJECT_TYPE_LABELS,
    TESTING_TOOLS,
    ProjectType,
    RequirementFlag,
    TestingApproach,
)
from vibeprompt.wizard.session import WizardSession
from vibeprompt.wizard.state import MIN_CORE_FEATURES, WizardStep

GATE_MESSAGES = {
    WizardStep.PROJECT_TYPE: "Please choose a project type.",
    WizardStep.PROJECT_DETAILS: "Name, description and target audience are all required.",
    WizardStep.FEATURES: f"Add at least {MIN_CORE_FEATURES} core features to continue.",
    WizardStep.TECH_STACK: "Pick an option for every technology category.",
    WizardStep.TESTING: "Please choose a testing approach.",
}


def confirm_overwrite(filepath: str) -> bool:
    """Confirm before overwriting an existing file."""
    if not os.path.exists(filepath):
        return True

    return click.confirm(
        f"File '{filepath}' already exists. Overwrite?",
        default=False,
    )


def _wait(session: WizardSession, formatter: OutputFormatter, message: str) -> None:
    with formatter.status(message):
        session.wait()


def prompt_project_type(session: WizardSession, formatter: OutputFormatter) -> None:
    """Choose a project type and optionally show guidance for it."""
    for project_type, (label, description) in PROJECT_TYPE_LABELS.items():
        formatter.console.print(f"  [cyan]{project_type.value:<16}[/cyan] {label}: {description}")

    current = session.state.answer.project_type or None
    choice = click.prompt(
        "Project type",
        type=click.Choice([t.value for t in ProjectType], case_sensitive=False),
        default=current,
        show_choices=False,
    )
    session.state.select_project_type(choice)

    if click.confirm("Want a quick overview of what this involves?", default=False):
        session.request_project_guidance()
        _wait(session, formatter, "Asking the assistant...")
        formatter.print_panel("What this involves", session.guidance)


def prompt_project_details(session: WizardSession, formatter: OutputFormatter) -> None:
    """Collect name, description and audience, offering an AI rewrite of the description."""
    answer = session.state.answer
    session.state.update("project_name", click.prompt("Project name", default=answer.project_name or None))
    session.state.update("description", click.prompt("Describe your idea", default=answer.description or None))

    if click.confirm("Let the assistant expand your description?", default=False):
        session.request_description_enhancement()
        _wait(session, formatter, "Enhancing description...")
        if session.enhanced_description:
            formatter.print_panel("Enhanced description", session.enhanced_description)
            if click.confirm("Use the enhanced description?", default=True):
                session.accept_enhanced_description()
        else:
            formatter.print_warning("No enhancement available; keeping your description.")

    session.state.update(
        "target_audience",
        click.prompt("Who is it for?", default=session.state.answer.target_audience or None),
    )


def prompt_features(session: WizardSession, formatter: OutputFormatter) -> None:
    """Add features by typing them or by picking suggestion numbers."""
    _wait(session, formatter, "Suggesting features...")
    formatter.print_numbered("Suggestions", session.suggestions)
    formatter.print_info(
        "Type a feature, a suggestion number, '-N' to remove feature N, or press Enter when done."
    )

    while True:
        formatter.print_numbered("Your features", session.state.answer.core_features)
        entry = click.prompt("Feature", default="", show_default=False).strip()
        if not entry:
            return
        if entry.startswith("-") and entry[1:].isdigit():
            session.state.remove_feature(int(entry[1:]) - 1)
        elif entry.isdigit() and 0 < int(entry) <= len(session.suggestions):
            session.state.add_feature(session.suggestions[int(entry) - 1])
        else:
            session.state.add_feature(entry)


def prompt_tech_stack(session: WizardSession, formatter: OutputFormatter) -> None:
    """Show the catalog and the recommendation, then pick one option per category."""
    _wait(session, formatter, "Gathering technology options...")
    catalog = session.catalog
    if catalog is None:
        return

    if session.recommendation:
        formatter.print_panel("Recommended stack", session.recommendation)

    formatter.print_catalog(catalog, session.state.answer.tech_stack.model_dump())
    for name in TECH_CATEGORIES:
        values = catalog.option_values(name)
        if not values:
            continue
        current = session.state.answer.tech_stack.get(name) or catalog.first_value(name)
        choice = click.prompt(
            catalog.category(name).title,
            type=click.Choice(values, case_sensitive=False),
            default=current if current in values else values[0],
        )
        session.state.select_tech(name, choice)


def prompt_testing(session: WizardSession, formatter: OutputFormatter) -> None:
    for approach in TestingApproach:
        formatter.console.print(f"  [cyan]{approach.value:<14}[/cyan] {', '.join(TESTING_TOOLS[approach])}")
    choice = click.prompt(
        "Testing approach",
        type=click.Choice([a.value for a in TestingApproach], case_sensitive=False),
        default=session.state.answer.testing.approach or TestingApproach.COMPREHENSIVE.value,
    )
    session.state.select_testing(choice)


def prompt_professional_requirements(session: WizardSession, formatter: OutputFormatter) -> None:
    """Toggle requirement flags by number until the user presses Enter."""
    flags = list(RequirementFlag)
    while True:
        formatter.print_requirements(session.state.answer)
        entry = click.prompt(
            "Toggle requirements (e.g. 1,7) or Enter to continue",
            default="",
            show_default=False,
        )
        numbers = [part.strip() for part in entry.split(",") if part.strip()]
        if not numbers:
            return
        for number in numbers:
            if number.isdigit() and 0 < int(number) <= len(flags):
                session.state.toggle_requirement(flags[int(number) - 1])
            else:
                formatter.print_warning(f"Ignoring '{number}'")


def prompt_additional_requirements(session: WizardSession, formatter: OutputFormatter) -> None:
    while True:
        formatter.print_numbered("Additional requirements", session.state.answer.additional_requirements)
        entry = click.prompt(
            "Anything else the builder should know? (Enter to finish)",
            default="",
            show_default=False,
        ).strip()
        if not entry:
            return
        session.state.add_requirement(entry)


STEP_PROMPTS = {
    WizardStep.PROJECT_TYPE: prompt_project_type,
    WizardStep.PROJECT_DETAILS: prompt_project_details,
    WizardStep.FEATURES: prompt_features,
    WizardStep.TECH_STACK: prompt_tech_stack,
    WizardStep.TESTING: prompt_testing,
    WizardStep.PROFESSIONAL_REQUIREMENTS: prompt_professional_requirements,
    WizardStep.FINAL_DETAILS: prompt_additional_requirements,
}


def run_wizard(session: WizardSession, formatter: OutputFormatter) -> str:
    """
    Walk the user through every step and return the generated specification.

    Args:
        session: Wizard session wired to an assistant
        formatter: Terminal output formatter

    Returns:
        Final specification text
    """
    while True:
        step = session.state.step
        formatter.print_step_header(step)

        if step == WizardStep.WELCOME:
            formatter.print_markdown(
                "Turn your project idea into a build-ready specification. "
                "Answer a few questions and the assistant fills in the technical details."
            )
        elif step == WizardStep.GENERATE:
            _wait(session, formatter, "Writing your specification...")
            return session.final_spec
        else:
            STEP_PROMPTS[step](session, formatter)

        if step == WizardStep.FINAL_DETAILS:
            formatter.print_summary(session.state.answer)
            if not click.confirm("Generate the specification now?", default=True):
                session.retreat()
                continue

        if not session.advance():
            formatter.print_warning(GATE_MESSAGES.get(step, "Cannot continue yet."))
