"""Data compiler screen - upload a JSON table schema."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Button, Input, Static

from datadock.orchestration import CompilerGateway, SchemaUploader, UploadState, UploadStatus


class DataCompilerScreen(Screen[None]):
    """Picks a schema file, submits it and shows the compiler's verdict."""

    def __init__(
        self,
        gateway: CompilerGateway,
        initial_path: Path | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.uploader = SchemaUploader(gateway, on_change=self._render_state)
        self.initial_path = initial_path

    def compose(self) -> ComposeResult:
        """Create the screen layout."""
        with Container(classes="screen-container"):
            yield Static("Data Compiler", classes="screen-title")
            yield Static("JSON table-schema file:", classes="section-title")
            with Horizontal(classes="upload-row"):
                yield Input(placeholder="path/to/schema.json", id="file-input")
                yield Button("Upload JSON", id="upload-button", variant="primary")
            yield Static("", id="upload-message")

    def on_mount(self) -> None:
        """Render the idle state; upload straight away if a file was given."""
        self._render_state(self.uploader.state)

        if self.initial_path is not None:
            self.query_one("#file-input", Input).value = str(self.initial_path)
            self.initial_path = None
            self._start_upload()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "upload-button":
            self._start_upload()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "file-input":
            self._start_upload()

    def _start_upload(self) -> None:
        """Submit the file named in the input, unless a submission is running."""
        if self.uploader.busy:
            return

        value = self.query_one("#file-input", Input).value.strip()
        if not value:
            self.notify("Enter the path of a JSON file to upload", severity="warning")
            return

        path = Path(value).expanduser()
        self.run_worker(self.uploader.submit_file(path), group="compile")

    def _render_state(self, state: UploadState) -> None:
        """Bring the controls and message in line with the uploader state."""
        self.query_one("#upload-button", Button).disabled = state.busy
        self.query_one("#file-input", Input).disabled = state.busy

        message = self.query_one("#upload-message", Static)
        text = "Compiling..." if state.busy else (state.message or "")
        message.update(Text(text))
        message.display = bool(text)
        message.set_class(state.status is UploadStatus.ACCEPTED, "message-success")
        message.set_class(state.is_error, "message-error")
