# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.text import Text


def header(view_name: Optional[str] = None) -> None:
    """Print the app name, and under it the name of the view being shown."""
    console = Console()
    console.print()
    console.print(Text(" keepsake", style="bold dark_orange"))
    if view_name is not None:
        console.print(Text(f" {view_name}", style="sandy_brown"))
