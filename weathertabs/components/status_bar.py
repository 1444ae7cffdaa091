"""Status bar summarising what the panel is showing."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ..services.session import WeatherSession

HINTS = (
    "[dim]1/2/3[/dim] View  [dim]/[/dim] Search  [dim]l[/dim] Location  "
    "[dim]r[/dim] Refresh  [dim]q[/dim] Quit"
)


class StatusBar(Horizontal):
    """One-line summary: location, active tab, fetch time, activity and key hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-location {
        width: auto;
        color: $text;
    }

    StatusBar #status-view, StatusBar #status-fetched {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-activity {
        width: 1fr;
        padding-left: 2;
        color: $warning;
    }

    StatusBar #status-hints {
        width: auto;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.location_label = ""
        self.view_label = ""

    def compose(self) -> ComposeResult:
        yield Static("No location", id="status-location")
        yield Static("", id="status-view")
        yield Static("", id="status-fetched")
        yield Static("", id="status-activity")
        yield Static(HINTS, id="status-hints")

    def show_session(self, session: WeatherSession) -> None:
        """Mirror the session's location, the active tab and the snapshot time."""
        location = session.last_location
        snapshot = session.controller.snapshot

        self.location_label = location.display_name if location else ""
        self.view_label = session.controller.active_view.tab_label if snapshot else ""

        self.query_one("#status-location", Static).update(
            f"[bold]{escape(self.location_label)}[/bold]" if location else "No location"
        )
        self.query_one("#status-view", Static).update(self.view_label)
        self.query_one("#status-fetched", Static).update(
            f"[dim]Fetched {snapshot.fetched_at:%H:%M}[/dim]" if snapshot else ""
        )

    def set_activity(self, activity: str) -> None:
        self.query_one("#status-activity", Static).update(
            f"[yellow]{escape(activity)}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        self.set_activity("")

