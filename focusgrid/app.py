# focusgrid/app.py
# Description: Demo dialog showing grid focus navigation in a Textual app
#
# Imports
from typing import Optional
#
# Third-Party Imports
from loguru import logger
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Checkbox, Footer, Static
#
# Local Imports
from .navigation.interfaces import InputCapabilities
from .Utils.logging_config import configure_logging
from .Widgets.focus_container import FocusContainer
#
#######################################################################################################################
#
# Classes:


class FocusGridDemoApp(App):
    """
    A small dialog whose widgets are reached with the arrow keys.

    Layout::

        [ New   , Open  , Save  , Library ]
        [ Wrap  , Bold  , -     , Library ]
        [ -     , OK    , Cancel, Library ]

    The toolbar on the right of the first row lives in its own container
    and is merged into the dialog layout on mount.
    """

    TITLE = "focusgrid demo"

    CSS = """
    #status {
        height: 1;
        margin-top: 1;
    }
    """

    def __init__(self, capabilities: Optional[InputCapabilities] = None, **kwargs):
        super().__init__(**kwargs)
        self.input_capabilities = capabilities

    def compose(self) -> ComposeResult:
        new, open_, save = Button("New", id="new"), Button("Open", id="open"), Button("Save", id="save")
        wrap, bold = Checkbox("Wrap", id="wrap"), Checkbox("Bold", id="bold")
        ok, cancel = Button("OK", id="ok", variant="primary"), Button("Cancel", id="cancel")
        library = Button("Library", id="library")
        help_button = Button("Help", id="help")
        about_button = Button("About", id="about")

        with FocusContainer(
            id="dialog",
            layout=[
                [new, open_, save, library],
                [wrap, bold, None, library],
                [None, ok, cancel, library],
            ],
            capabilities=self.input_capabilities,
        ):
            with Horizontal(classes="row"):
                yield new
                yield open_
                yield save
                yield library
            with Horizontal(classes="row"):
                yield wrap
                yield bold
            with Horizontal(classes="row"):
                yield ok
                yield cancel
            yield FocusContainer(
                help_button,
                about_button,
                id="toolbar",
                layout=[[help_button, about_button]],
                capabilities=self.input_capabilities,
                focus_on_mount=False,
            )
        yield Static("Use the arrow keys to move, Enter to activate", id="status")
        yield Footer()

    def on_mount(self) -> None:
        dialog = self.query_one("#dialog", FocusContainer)
        dialog.merge_layout_horizontally(self.query_one("#toolbar", FocusContainer))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.query_one("#status", Static).update(f"Pressed: {event.button.label}")
        logger.info(f"Button pressed: {event.button.id}")
        if event.button.id in ("ok", "cancel"):
            self.exit(event.button.id)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self.query_one("#status", Static).update(f"{event.checkbox.label}: {event.value}")


def main_cli_runner():
    """Entry point for the focusgrid-demo command."""
    # The TUI owns the terminal, log to the configured file only
    configure_logging(console=False)
    logger.info("--- Starting focusgrid demo ---")
    result = FocusGridDemoApp().run()
    logger.info(f"--- Demo exited with: {result} ---")


if __name__ == "__main__":
    main_cli_runner()

#
# End of app.py
#######################################################################################################################
