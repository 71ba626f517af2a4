import json
import logging
from pathlib import Path

import click

from .config import FileLocator, RomeConfig
from .errors import RomeStepError
from .factory import build
from .formatter import RomeFormatter


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--path-to-exe", default=None, type=str, help="Rome executable path or command name on PATH")
@click.option("--download-dir", default=None, type=str, help="Directory for the downloaded Rome executable")
@click.option("--rome-version", default=None, type=str, help="Rome version to download")
@click.option("--base-dir", default=".", type=click.Path(file_okay=False, resolve_path=True))
@click.option("--data-dir", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def rome_step(config, path_to_exe, download_dir, rome_version, base_dir, data_dir, verbose, files):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if config is not None:
        with open(config) as f:
            rome_config = RomeConfig.from_dict(json.load(f))
    else:
        rome_config = RomeConfig()

    # Command line options override the config file
    rome_config = rome_config.merged(path_to_exe=path_to_exe, download_dir=download_dir, version=rome_version)

    step = build(rome_config, FileLocator.for_project(base_dir, data_dir))

    if not files:
        click.echo(json.dumps(step.to_dict(), indent=2))
        return

    formatter = RomeFormatter(step)
    if not formatter.is_available():
        raise click.ClickException(f"Rome is not available: {step.exe_path or step.download_dir}")

    for file in files:
        path = Path(file)
        try:
            formatted = formatter.format(path.read_text(encoding="utf-8"), path.name)
        except RomeStepError as e:
            raise click.ClickException(str(e)) from e
        path.write_text(formatted, encoding="utf-8")
        click.echo(f"Formatted {path}")
