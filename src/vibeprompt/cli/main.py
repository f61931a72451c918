"""CLI interface for vibeprompt."""

import json
import os
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from vibeprompt.catalogs import fallback_catalog
from vibeprompt.cli.formatters import OutputFormatter
from vibeprompt.cli.interactive import confirm_overwrite, run_wizard
from vibeprompt.core.config import GATEWAY_MODES, Config
from vibeprompt.core.gateway import create_gateway
from vibeprompt.core.logging import configure_logging
from vibeprompt.prompts import final_spec_prompt
from vibeprompt.schemas.project import ProjectAnswer, ProjectType
from vibeprompt.services.assistant import ProjectAssistant
from vibeprompt.wizard.session import WizardSession


@click.group()
@click.version_option()
@click.option(
    "--mode",
    type=click.Choice(list(GATEWAY_MODES), case_sensitive=False),
    default=None,
    help="Call the provider directly or through the relay (default: direct)",
)
@click.option("--model", "-m", default=None, help="Model name (default: gpt-4)")
@click.option(
    "--api-key",
    default=None,
    help="Provider API key for direct mode (or use OPENAI_API_KEY env var)",
)
@click.option(
    "--relay-url",
    default=None,
    help="Relay endpoint for relay mode (default: http://localhost:8000/api/chat)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file (YAML or JSON)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level (default: WARNING)",
)
@click.option(
    "--log-file",
    type=click.Path(),
    default=None,
    help="Path to log file (default: stderr)",
)
@click.option(
    "--json-logging",
    is_flag=True,
    default=False,
    help="Output logs in JSON format",
)
@click.pass_context
def main(
    ctx: click.Context,
    mode: Optional[str],
    model: Optional[str],
    api_key: Optional[str],
    relay_url: Optional[str],
    config_file: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
    json_logging: bool,
):
    """
    vibeprompt - Turn a project idea into a build-ready specification prompt.

    A guided wizard collects your idea, suggests features, recommends a tech
    stack and assembles a detailed specification you can hand to an AI
    coding assistant.

    \b
    Gateway modes:
      - direct: calls the OpenAI API with your key (OPENAI_API_KEY or --api-key)
      - relay:  posts to a vibeprompt relay that holds the key (see 'vibeprompt relay')
    """
    cli_args = {
        "mode": mode.lower() if mode else None,
        "model": model,
        "api_key": api_key,
        "relay_url": relay_url,
        "log_level": log_level,
        "log_file": log_file,
        "json_logging": json_logging or None,
    }
    config = Config.load(cli_args, config_file=Path(config_file) if config_file else None)
    configure_logging(
        level=config.log_level,
        json_output=bool(config.json_logging),
        log_file=config.log_file,
    )
    ctx.obj = config


def _build_assistant(config: Config) -> ProjectAssistant:
    try:
        gateway_config = config.gateway_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return ProjectAssistant(create_gateway(gateway_config))


def _write_output(text: str, output: Optional[str], formatter: OutputFormatter) -> None:
    if not output:
        click.echo(text)
        return
    if not confirm_overwrite(output):
        formatter.print_warning("Not overwriting; specification printed below.")
        click.echo(text)
        return
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    formatter.print_success(f"Specification written to: {output_path}")


def _load_answers(path: Path) -> ProjectAnswer:
    """Read a ProjectAnswer from a YAML or JSON file (camelCase or snake_case keys)."""
    content = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)
    if not isinstance(data, dict):
        raise ValueError("answers file must contain a mapping")
    return ProjectAnswer.model_validate(data)


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Output file (default: stdout)",
)
@click.pass_obj
def wizard(config: Config, output: Optional[str]):
    """
    Walk through the project wizard interactively.

    Examples:

      vibeprompt wizard -o project-spec.md

      vibeprompt --mode relay wizard
    """
    formatter = OutputFormatter()
    assistant = _build_assistant(config)
    if assistant.gateway.missing_credential:
        formatter.print_warning("No API key configured: AI assistance is disabled for this run.")

    with WizardSession(assistant) as session:
        try:
            spec = run_wizard(session, formatter)
        except click.Abort:
            formatter.print_error("Wizard cancelled")
            sys.exit(130)

    _write_output(spec, output, formatter)


@main.command()
@click.argument("answers_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Output file (default: stdout)",
)
@click.option(
    "--prompt-only",
    is_flag=True,
    default=False,
    help="Print the assembled prompt instead of calling the model",
)
@click.pass_obj
def generate(config: Config, answers_file: str, output: Optional[str], prompt_only: bool):
    """
    Generate a specification from a saved answers file.

    ANSWERS_FILE is a YAML or JSON file with the wizard answers
    (projectType, projectName, description, coreFeatures, ...).
    """
    formatter = OutputFormatter()
    try:
        answer = _load_answers(Path(answers_file))
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        click.echo(f"Error: Could not load answers from {answers_file}: {e}", err=True)
        sys.exit(1)

    if prompt_only:
        prompt = final_spec_prompt(answer)
        _write_output(f"{prompt.system}\n\n---\n\n{prompt.user}", output, formatter)
        return

    assistant = _build_assistant(config)
    with formatter.status("Writing your specification..."):
        spec = assistant.generate_final_spec(answer)
    _write_output(spec, output, formatter)


@main.command()
@click.argument(
    "project_type",
    type=click.Choice([t.value for t in ProjectType], case_sensitive=False),
)
@click.option(
    "--offline",
    is_flag=True,
    default=False,
    help="Show the built-in catalog without calling the model",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the catalog as JSON")
@click.pass_obj
def catalog(config: Config, project_type: str, offline: bool, as_json: bool):
    """Show technology options for PROJECT_TYPE."""
    formatter = OutputFormatter()
    project_type = project_type.lower()
    if offline:
        options = fallback_catalog(project_type)
    else:
        assistant = _build_assistant(config)
        with formatter.status("Gathering technology options..."):
            options = assistant.generate_tech_options(project_type)

    if as_json:
        formatter.print_json(options.model_dump(mode="json"))
    else:
        formatter.print_catalog(options)


@main.command()
@click.option("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
@click.option("--port", "-p", type=int, default=8000, help="Port (default: 8000)")
@click.pass_obj
def relay(config: Config, host: str, port: int):
    """
    Run the chat relay so clients never see the provider key.

    The relay reads OPENAI_API_KEY on startup and serves POST /api/chat.
    """
    from django.core.management import execute_from_command_line

    if config.api_key:
        os.environ.setdefault("OPENAI_API_KEY", config.api_key)
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vibeprompt.webapp.settings")
    if not os.environ.get("OPENAI_API_KEY"):
        click.echo("Warning: OPENAI_API_KEY is not set; the relay will answer with HTTP 500.", err=True)

    execute_from_command_line(["vibeprompt", "runserver", f"{host}:{port}", "--noreload"])


@main.group("config")
def config_group():
    """Configuration management commands."""
    pass


@config_group.command("show")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["yaml", "json"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.pass_obj
def config_show(config: Config, format: str):
    """Show the resolved configuration (the API key is redacted)."""
    if format == "yaml":
        click.echo(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))
    else:
        click.echo(json.dumps(config.to_dict(), indent=2))


@config_group.command("export")
@click.argument("output", type=click.Path(dir_okay=False))
@click.option(
    "--format",
    "-f",
    type=click.Choice(["yaml", "json"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.pass_obj
def config_export(config: Config, output: str, format: str):
    """Save the resolved configuration to a file. The API key is never written."""
    output_path = Path(output)
    config.save(output_path, format=format)
    click.echo(f"Configuration exported to: {output_path}")


if __name__ == "__main__":
    main()
