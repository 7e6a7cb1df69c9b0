"""Rich display functions for profile status.

Provides the table builder and JSON rendering used by ``profctl status``.
"""

import json

from rich.markup import escape
from rich.table import Table

from profctl.models.status import FileState, FileStatus

_STATE_STYLES: dict[FileState, str] = {
    FileState.ACTIVE: "state.active",
    FileState.PRISTINE: "state.pristine",
    FileState.MODIFIED: "state.modified",
    FileState.MISSING: "state.missing",
}


def create_status_table(statuses: list[FileStatus]) -> Table:
    """Create a Rich table listing every (profile, file) pair with its state.

    Args:
        statuses: Status entries to display.

    Returns:
        Rich Table configured for status display.
    """
    table = Table(
        title="Profiles",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Profile", style="profile.name", no_wrap=True)
    table.add_column("File")
    table.add_column("State", justify="center")

    for entry in statuses:
        style = _STATE_STYLES[entry.state]
        table.add_row(
            escape(entry.profile),
            escape(str(entry.path)),
            f"[{style}]{entry.state.value}[/{style}]",
        )

    return table


def statuses_to_json(statuses: list[FileStatus]) -> str:
    """Serialize status entries as a JSON document grouped by profile."""
    grouped: dict[str, list[dict[str, str]]] = {}
    for entry in statuses:
        grouped.setdefault(entry.profile, []).append(
            {"path": str(entry.path), "state": entry.state.value}
        )
    return json.dumps(grouped, indent=2)
