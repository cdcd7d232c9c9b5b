# taskboard/ui/app_shell.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

import flet as ft
import httpx

from core.settings import UI
from services.api_client import TaskApiClient
from services.task_state import TaskBoardState
from ui.task_form import TaskForm
from ui.task_list import TaskListView

logger = logging.getLogger("taskboard.ui")

SERVER_ERROR_TEXT = "The task server did not accept the request"


class AppShell:
    """Composition root: owns the state container and wires it to the widgets."""

    def __init__(self, page: ft.Page, api: Optional[TaskApiClient] = None):
        self.page = page
        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START

        self.api = api or TaskApiClient()
        self.state = TaskBoardState(self.api)

        self.form = TaskForm(
            on_save=self._guarded(self.state.save),
            notify=self.toast,
            on_cancel_edit=self.state.cancel_edit,
        )
        self.task_list = TaskListView(
            on_toggle=self._guarded(self.state.toggle_complete),
            on_edit=self.state.start_edit,
            on_delete=self._guarded(self.delete_task),
        )
        self.state.subscribe(self._on_state_change)

        self.root = ft.Container(
            expand=True,
            padding=20,
            content=ft.Row(
                [
                    ft.Column([self.form.view], alignment=ft.MainAxisAlignment.START),
                    ft.VerticalDivider(width=1),
                    self.task_list.view,
                ],
                expand=True,
                spacing=16,
                vertical_alignment=ft.CrossAxisAlignment.START,
            ),
        )

    # ---------- mount ----------
    def mount(self):
        self.page.controls.clear()
        self.page.add(self.root)
        self._on_state_change(self.state)
        logger.info("UI mounted, task API at %s", self.api.http.base_url)
        self.page.run_task(self._guarded(self.state.load_all))

    async def close(self) -> None:
        self.state.unsubscribe(self._on_state_change)
        await self.api.aclose()

    def _on_state_change(self, state: TaskBoardState) -> None:
        self.form.set_initial(state.editing)
        self.task_list.render(state.tasks, loading=state.loading)

    # ---------- intents ----------
    async def delete_task(self, task_id: str) -> bool:
        return await self.state.delete(task_id, self.confirm_delete)

    async def confirm_delete(self) -> bool:
        """Ask before deleting; resolves False when cancelled or dismissed."""
        answer: asyncio.Future[bool] = asyncio.get_running_loop().create_future()

        def _resolve(value: bool):
            if not answer.done():
                answer.set_result(value)
            self.page.close(dlg)

        async def _on_yes(_):
            _resolve(True)

        async def _on_no(_):
            _resolve(False)

        dlg = ft.AlertDialog(
            modal=True,
            title=ft.Text("Delete this task?"),
            content=ft.Text("This cannot be undone"),
            actions=[
                ft.TextButton("Cancel", on_click=_on_no),
                ft.FilledButton("Delete", icon=ft.Icons.DELETE_OUTLINE, on_click=_on_yes),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
            on_dismiss=_on_no,
        )
        self.page.open(dlg)
        return await answer

    def _guarded(self, action: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        """Tell the user a remote call failed, then let the error propagate."""

        async def _run(*args, **kwargs):
            try:
                return await action(*args, **kwargs)
            except httpx.HTTPError:
                self.toast(SERVER_ERROR_TEXT)
                raise

        return _run

    # ---------- helpers ----------
    def toast(self, text: str):
        self.page.open(ft.SnackBar(ft.Text(text)))
