# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import click
import typer
from keepsake import configuration
from keepsake.repository.configuration import CONFIGURATION_REPO
from keepsake.terminal.custom_typer import AliasedTyperGroup
from keepsake.view.settings import configuration_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Show the settings in effect and where they are read from."""
    configuration_view(
        CONFIGURATION_REPO.get_config(),
        configuration.APP_CONFIG_PATH,
        configuration.DATA_PATH,
    )


@app.command("set, s")
def set_config(
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    share_origin: Annotated[Optional[str], typer.Option("--share-origin")] = None,
    storage_quota_bytes: Annotated[
        Optional[int], typer.Option("--storage-quota-bytes", min=1)
    ] = None,
    remove_storage_quota: Annotated[
        bool, typer.Option("--remove-storage-quota")
    ] = False,
    connectivity_host: Annotated[
        Optional[str], typer.Option("--connectivity-host")
    ] = None,
    connectivity_port: Annotated[
        Optional[int], typer.Option("--connectivity-port", min=1, max=65535)
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            click_type=click.Choice(configuration.LOG_LEVELS, case_sensitive=False),
        ),
    ] = None,
) -> None:
    """
    Change settings. They are written to the config file when the command
    exits and take effect on the next run.
    """
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        share_origin=share_origin,
        storage_quota_bytes=storage_quota_bytes,
        remove_storage_quota=remove_storage_quota,
        connectivity_host=connectivity_host,
        connectivity_port=connectivity_port,
        log_level=log_level,
    )
    view()
