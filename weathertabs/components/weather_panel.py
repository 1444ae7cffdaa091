"""Weather panel component for displaying forecast views."""

from rich.markup import escape
from textual import events
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Label, Static, Tab, Tabs

from ..models.view import DayRow, SummaryLine, ViewKind, ViewModel


class WeatherPanel(Static):
    """Panel with Today / Tomorrow / 7-Day tabs. Acts as the render sink."""

    class ViewSelected(Message):
        """Message sent when the user activates a tab."""

        def __init__(self, view: ViewKind, key: str | None = None) -> None:
            super().__init__()
            self.view = view
            self.key = key

    DEFAULT_CSS = """
    WeatherPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    WeatherPanel #weather-header {
        text-style: bold;
        padding: 0 0 1 0;
    }

    WeatherPanel #weather-error {
        color: $error;
        display: none;
    }

    WeatherPanel #weather-error.visible {
        display: block;
    }

    WeatherPanel Tabs {
        display: none;
    }

    WeatherPanel Tabs.visible {
        display: block;
    }

    WeatherPanel #weather-scroll {
        height: 1fr;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._loading = False
        self._view_model: ViewModel | None = None

    @property
    def view_model(self) -> ViewModel | None:
        return self._view_model

    def compose(self) -> ComposeResult:
        yield Static("[bold]Weather[/bold]", id="weather-header")
        yield Tabs(*(Tab(kind.tab_label, id=kind.value) for kind in ViewKind), id="weather-tabs")
        yield Label("", id="weather-error")
        with VerticalScroll(id="weather-scroll"):
            yield Static("[dim]Search for a city to see its forecast.[/dim]", id="weather-content")

    def show_loading(self, message: str = "Loading...") -> None:
        """Set loading state."""
        self._loading = True
        self._view_model = None
        self.query_one("#weather-header", Static).update("[bold]Weather[/bold]")
        self.query_one("#weather-tabs", Tabs).remove_class("visible")
        self.query_one("#weather-error", Label).remove_class("visible")
        self.query_one("#weather-content", Static).update(f"[dim]{escape(message)}[/dim]")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self._loading = False
        self._view_model = None
        error_label = self.query_one("#weather-error", Label)
        error_label.update(f"[red]{escape(message)}[/red]")
        error_label.add_class("visible")
        self.query_one("#weather-content", Static).update("")

    def render_view(self, view_model: ViewModel) -> None:
        """Paint a view model and mark its tab active."""
        self._loading = False
        self._view_model = view_model

        header = view_model.location_name or "Weather"
        self.query_one("#weather-header", Static).update(f"[bold]{escape(header)}[/bold]")

        tabs = self.query_one("#weather-tabs", Tabs)
        tabs.add_class("visible")
        if tabs.active != view_model.view.value:
            tabs.active = view_model.view.value

        self.query_one("#weather-error", Label).remove_class("visible")
        self.query_one("#weather-content", Static).update(self._format(view_model))

    def _format_summary(self, line: SummaryLine) -> str:
        if line.classification is None:
            return escape(line.text)
        color = line.classification.color.value
        return f"{escape(line.label)}: [black on {color}] {escape(line.value)} [/]"

    def _format(self, view_model: ViewModel) -> str:
        lines = []
        if view_model.title:
            lines.append(f"[bold]{escape(view_model.title)}[/bold]")
        lines.extend(self._format_summary(line) for line in view_model.summary)
        if view_model.summary and view_model.rows:
            lines.append("")
        for row in view_model.rows:
            width = 11 if isinstance(row, DayRow) else 5
            lines.append(
                f"[bold]{row.heading:<{width}}[/bold]  {row.temperature:>10}  {escape(row.description)}"
            )
        if not view_model.rows:
            lines.append("[dim]No hourly data left for this period[/dim]")
        return "\n".join(lines)

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        """Forward tab changes made by the user."""
        event.stop()
        if event.tab is None or event.tab.id is None:
            return
        view = ViewKind(event.tab.id)
        if self._view_model is not None and self._view_model.view is view:
            return
        self.post_message(self.ViewSelected(view))

    def on_key(self, event: events.Key) -> None:
        """Enter or Space on the focused tab strip re-activates its tab."""
        tabs = self.query_one("#weather-tabs", Tabs)
        if not tabs.has_focus or tabs.active is None:
            return
        if event.key in ("enter", "space"):
            event.stop()
            self.post_message(self.ViewSelected(ViewKind(tabs.active), key=event.key))
