"""CLI entry point for Locator Warden."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .analyzer.coverage import validate_coverage
from .checkers.console import validate_console_clean
from .checkers.locators import validate_locators
from .checkers.naming import validate_naming
from .config import Config, load_config
from .errors import FileReadError, UnknownLocator
from .locators.descriptors import render
from .locators.registry import default_registry
from .models import ViolationKind, ViolationReport

console = Console()

NAMING_RULES = [
    "📄 Files: pageName_action.spec.js or snake_case.py (e.g. login_success.spec.js)",
    "🏗️  Classes: PascalCase (e.g. LoginPage, UserDashboard)",
    "🔧 Methods: camelCase in JS/TS, snake_case in Python",
    '📄 Page Objects: must end with "Page" (e.g. LoginPage)',
    '🧪 Tests: "should ..." titles in JS/TS, test_snake_case in Python',
]

LOCATOR_TIPS = [
    "Review and consolidate duplicate locators",
    "Ensure each locator has a unique purpose",
    "Alias shared elements instead of repeating their value",
    "Move any hardcoded selectors to the locator catalog",
]


@click.group()
@click.version_option(package_name="locator-warden")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Locator Warden - keep Playwright locators centralized and consistent."""
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    ctx.obj["config"] = load_config(Path(config_path) if config_path else None)


def _scan_dirs(config: Config, root: Path) -> list[Path]:
    return [root / name for name in config.paths.scan_dirs]


@main.command()
@click.option("--registry", "registry_path", type=click.Path(path_type=Path), help="Locator catalog source file")
@click.option("--data", "data_path", type=click.Path(path_type=Path), help="Data file to scan for hardcoded selectors")
@click.option("--from-registry", is_flag=True, help="Check the live registry instead of parsing the catalog source")
@click.pass_context
def locators(ctx: click.Context, registry_path: Path | None, data_path: Path | None, from_registry: bool) -> None:
    """Find duplicate locators and hardcoded selectors."""
    config: Config = ctx.obj["config"]
    console.print("\n[bold blue]🔍 Validating locators for duplicates and hardcoded selectors...[/]\n")

    report = _run(
        validate_locators,
        registry_path or config.paths.registry,
        data_path or config.paths.test_data,
        registry=default_registry() if from_registry else None,
    )
    console.print(f"[dim]📊 Found {report.scanned} locators to validate[/]\n")
    _exit_with(report, _show_locator_report)


@main.command()
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Suite root")
@click.pass_context
def naming(ctx: click.Context, root: Path) -> None:
    """Validate file, class, method and test naming conventions."""
    config: Config = ctx.obj["config"]
    console.print("\n[bold blue]🔍 Validating naming conventions...[/]\n")

    report = _run(
        validate_naming,
        _scan_dirs(config, root),
        page_dirs=config.paths.page_dirs,
        exclude=config.paths.exclude,
        root=root,
    )
    console.print(f"[dim]📊 Found {report.scanned} files to validate[/]\n")
    _exit_with(report, _show_naming_report)


@main.command(name="console")
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Suite root")
@click.pass_context
def console_clean(ctx: click.Context, root: Path) -> None:
    """Find stray console output in sources and test results."""
    config: Config = ctx.obj["config"]
    console.print("\n[bold blue]🔍 Validating console output for unwanted logs...[/]\n")

    report = _run(
        validate_console_clean,
        _scan_dirs(config, root),
        results_dir=root / config.paths.results_dir,
        exclude=config.paths.exclude,
    )
    console.print(f"[dim]📊 Scanned {report.scanned} files[/]\n")
    _exit_with(report, _show_console_report)


@main.command()
@click.option("--snapshot", "-s", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Saved HTML page")
@click.option("--group", "-g", help="Only check one locator group")
def coverage(snapshot: Path, group: str | None) -> None:
    """Report registry locators that match nothing in an HTML snapshot."""
    console.print(f"\n[bold blue]🔍 Checking locator coverage against:[/] {snapshot}\n")

    try:
        report = _run(validate_coverage, default_registry(), snapshot, group)
    except UnknownLocator as e:
        raise click.BadParameter(str(e), param_hint="--group") from e

    console.print(f"[dim]📊 Checked {report.scanned} locators[/]\n")
    _exit_with(report, _show_coverage_report)


@main.command()
@click.option("--group", "-g", help="Only show one locator group")
def registry(group: str | None) -> None:
    """List the locator registry."""
    reg = default_registry()
    aliases = dict(reg.aliases())

    if group:
        try:
            reg.group(group)
        except UnknownLocator as e:
            raise click.BadParameter(str(e), param_hint="--group") from e

    table = Table(title="Locator Registry")
    table.add_column("Key", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Selector", style="dim")
    table.add_column("Alias of", style="magenta")

    for name, descriptor in reg.qualified().items():
        if group and not name.startswith(f"{group}."):
            continue
        table.add_row(name, descriptor.kind, escape(render(descriptor)), aliases.get(name, ""))

    console.print(table)

    for shadow in reg.shadowed():
        console.print(f"[yellow]⚠️  {shadow.key}: {shadow.hidden} is shadowed by {shadow.winner} when flattened[/]")


@main.command()
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Suite root")
@click.pass_context
def check(ctx: click.Context, root: Path) -> None:
    """Run the locator, naming and console checks together."""
    config: Config = ctx.obj["config"]
    scan_dirs = _scan_dirs(config, root)

    reports = [
        (_run(validate_locators, config.paths.registry, config.paths.test_data), _show_locator_report),
        (_run(validate_naming, scan_dirs, page_dirs=config.paths.page_dirs,
              exclude=config.paths.exclude, root=root), _show_naming_report),
        (_run(validate_console_clean, scan_dirs, results_dir=root / config.paths.results_dir,
              exclude=config.paths.exclude), _show_console_report),
    ]

    failed = 0
    for report, show in reports:
        console.rule(f"[bold]{report.checker}[/]")
        _show_notes(report)
        if report.ok:
            console.print(f"[bold green]✅ {report.checker}: no issues in {report.scanned} items[/]")
        else:
            failed += 1
            show(report)

    console.print()
    if failed:
        console.print(f"[bold red]❌ {failed} of {len(reports)} checks failed[/]\n")
        sys.exit(1)
    console.print("[bold green]🎉 All checks passed![/]\n")


def _run(checker, *args, **kwargs) -> ViolationReport:
    """Run a checker; unreadable required files end the process with status 1."""
    try:
        return checker(*args, **kwargs)
    except FileReadError as e:
        console.print(f"[bold red]❌ Error reading file:[/] {escape(str(e))}")
        sys.exit(1)


def _show_notes(report: ViolationReport) -> None:
    for note in report.notes:
        console.print(f"[yellow]⚠️  {escape(note)}[/]")


def _exit_with(report: ViolationReport, show) -> None:
    _show_notes(report)

    if report.ok:
        console.print("[bold green]✅ No issues found![/]\n")
        sys.exit(0)

    show(report)
    console.print()
    sys.exit(1)


def _show_locator_report(report: ViolationReport) -> None:
    duplicates = report.of_kind(ViolationKind.DUPLICATE)
    hardcoded = report.of_kind(ViolationKind.HARDCODED)

    if duplicates:
        console.print("[bold red]❌ Found duplicate locators:[/]")
        for index, violation in enumerate(duplicates, start=1):
            console.print(f'\n{index}. Duplicate Value: "{escape(violation.detail)}"')
            console.print("   Used by:")
            for name in violation.locations:
                console.print(f"   - [cyan]{name}[/]")

    if hardcoded:
        console.print("\n[bold red]❌ Found hardcoded selectors in test data:[/]")
        table = Table()
        table.add_column("Location", style="cyan")
        table.add_column("Selector", style="yellow")
        table.add_column("Recommendation", style="dim")
        for violation in hardcoded:
            table.add_row(violation.locations[0], escape(violation.detail), violation.recommendation or "")
        console.print(table)

    console.print("\n[bold]💡 Recommendations:[/]")
    for tip in LOCATOR_TIPS:
        console.print(f"   - {tip}")


def _show_naming_report(report: ViolationReport) -> None:
    console.print("[bold red]❌ Found naming convention violations:[/]")

    by_file: dict[str, list[str]] = {}
    for violation in report.violations:
        by_file.setdefault(violation.locations[0], []).append(violation.detail)

    for file, messages in by_file.items():
        console.print(f"\n[cyan]📁 {escape(file)}:[/]")
        for message in messages:
            console.print(f"   ❌ {escape(message)}")

    console.print("\n[bold]💡 Naming Convention Rules:[/]")
    for rule in NAMING_RULES:
        console.print(f"   {rule}")


def _show_console_report(report: ViolationReport) -> None:
    for violation in report.violations:
        console.print(f"[red]❌ Console statement found:[/] {escape(violation.locations[0])}: {escape(violation.detail)}")


def _show_coverage_report(report: ViolationReport) -> None:
    table = Table(title="Uncovered Locators")
    table.add_column("Key", style="cyan")
    table.add_column("Detail", style="yellow")
    for violation in report.violations:
        table.add_row(violation.locations[0], escape(violation.detail))
    console.print(table)


if __name__ == "__main__":
    main()
