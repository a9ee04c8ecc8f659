"""
lifochain.cli.run_cmd — lifochain run command.

  lifochain run -f script.yaml                 — Run a script
  lifochain run -f script.yaml -f more.yaml    — Base script + overlays
  lifochain run -f script.yaml -o report.yaml  — Write report to a file
"""

import sys
import click
import yaml

from lifochain.script.engine import run_script, ScriptError


@click.command("run")
@click.option("-f", "--file", "script_files", multiple=True, required=True,
              help="Script file (multiple allowed, later files are overlays)")
@click.option("-o", "--output", default=None,
              help="Output file (default: stdout)")
def run_cmd(script_files, output):
    """Replay a chain script and print a YAML report."""
    try:
        result = run_script(list(script_files))
    except (FileNotFoundError, ScriptError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _output_yaml(yaml.safe_dump(result.to_dict(), sort_keys=False), output)


def _output_yaml(text: str, output: str | None) -> None:
    if output:
        with open(output, "w") as f:
            f.write(text)
        click.echo(f"Written to {output}", err=True)
    else:
        click.echo(text, nl=False)
