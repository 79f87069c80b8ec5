# sassimport/cli/interface.py
import sys
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import click
from click_option_group import optgroup
from rich.console import Console as RichConsole
from rich.table import Table
import structlog

from sassimport import __version__ as app_version
from sassimport.config.loader import build_settings, load_config_data
from sassimport.core.globbing import is_glob
from sassimport.core.importer import Importer
from sassimport.core.models import ImportResult
from sassimport.environment.filesystem import FileSystemEnvironment
from sassimport.exceptions import ConfigError, SassImportError, UnresolvedImportError
from sassimport.logging_setup import configure_logging

log = structlog.get_logger(__name__)

def _parse_vars(raw_vars: Tuple[str, ...]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for item in raw_vars:
        if "=" not in item:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'", param_hint="--var")
        key, value = item.split("=", 1)
        parsed[key.strip()] = value
    return parsed

def _render_results(
    console: RichConsole,
    results: List[ImportResult],
    dependencies: List[Path],
    show_content: bool,
    show_deps: bool,
):
    table = Table(title="resolved imports", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("path")
    table.add_column("bytes", justify="right")
    for i, result in enumerate(results, 1):
        table.add_row(str(i), result.path, f"{len(result.content.encode('utf-8')):,}")
    console.print(table)

    if show_content:
        for result in results:
            console.rule(result.path)
            console.print(result.content, markup=False, highlight=False)

    if show_deps:
        console.rule("dependencies")
        for dep in dependencies:
            console.print(str(dep), markup=False, highlight=False)

def _results_as_json(results: List[ImportResult], dependencies: List[Path], show_content: bool) -> str:
    payload: Dict[str, Any] = {
        "imports": [
            {"path": r.path, **({"content": r.content} if show_content else {})}
            for r in results
        ],
        "dependencies": [str(d) for d in dependencies],
    }
    return json.dumps(payload, indent=2) + "\n"

@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("import_path")
@optgroup.group("Resolution Context", help="Where the import appears and which roots are searched.")
@optgroup.option("-p", "--parent", "parent_path", required=True, help="File containing the import: absolute, or relative to an asset root.")
@optgroup.option("-r", "--root", "roots", multiple=True, type=click.Path(file_okay=False, path_type=Path), help="Asset root directory; repeat for several. Default: from config, else the root path.")
@optgroup.option("--root-path", "root_path", type=click.Path(exists=True, file_okay=False, path_type=Path), default=None, help="Project root used for relative parents and roots. Default: current directory.")
@optgroup.option("-e", "--exclude", "exclude_patterns", multiple=True, help="Gitwildmatch patterns for files that may not be imported.")
@optgroup.option("--var", "template_vars", multiple=True, metavar="KEY=VALUE", help="Variables for .hbs templated assets.")
@optgroup.group("Output", help="What to print for the resolved imports.")
@optgroup.option("--content", "show_content", is_flag=True, default=False, help="Print the materialized content of each import.")
@optgroup.option("--deps", "show_deps", is_flag=True, default=False, help="Print the recorded build dependencies.")
@optgroup.option("--json", "as_json", is_flag=True, default=False, help="Emit results as JSON.")
@optgroup.group("Application Behavior", help="Configuration and logging.")
@optgroup.option("-c", "--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Explicit TOML config file.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="sassimport", prog_name="sassimport", help="Show version and exit.")
def main_cli(
    import_path: str,
    parent_path: str,
    roots: Tuple[Path, ...],
    root_path: Optional[Path],
    exclude_patterns: Tuple[str, ...],
    template_vars: Tuple[str, ...],
    show_content: bool,
    show_deps: bool,
    as_json: bool,
    config_file: Optional[Path],
    verbosity_level: int,
    force_json_logs: bool,
):
    """sassimport: resolve a stylesheet @import the way the asset pipeline would."""
    log_level = "warning"
    if verbosity_level == 1: log_level = "info"
    elif verbosity_level >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level, force_json_logs=force_json_logs)

    try:
        raw_config = load_config_data(start_dir=root_path, config_file=config_file)
        settings = build_settings(
            raw_config,
            roots=list(roots),
            root_path=root_path,
            exclude_patterns=list(exclude_patterns),
            template_vars=_parse_vars(template_vars),
        )
        environment = FileSystemEnvironment(settings)
        context = environment.compilation(Path(parent_path))
        importer = Importer(context, settings)

        results = importer.imports(import_path, parent_path)
        if not results and not is_glob(import_path):
            raise UnresolvedImportError(f"File to import not found or unreadable: {import_path}")

        if as_json:
            click.echo(_results_as_json(results, context.dependencies, show_content), nl=False)
        else:
            _render_results(RichConsole(), results, context.dependencies, show_content, show_deps)
    except (ConfigError, SassImportError) as e:
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
