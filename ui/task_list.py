# taskboard/ui/task_list.py
from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Sequence

import flet as ft

from core.priorities import priority_bgcolor, priority_color, priority_label
from core.settings import UI
from models.schemas import TaskRead
from utils.datetime_utils import date_only, local_display

TaskIntent = Callable[[TaskRead], Any]
DeleteIntent = Callable[[str], Awaitable[Any]]


class TaskListView:
    """Renders the task collection and forwards row intents unchanged."""

    def __init__(
        self,
        *,
        on_toggle: Callable[[TaskRead], Awaitable[Any]],
        on_edit: TaskIntent,
        on_delete: DeleteIntent,
    ):
        self.on_toggle = on_toggle
        self.on_edit = on_edit
        self.on_delete = on_delete
        self._tasks: list[TaskRead] = []

        self.count_text = ft.Text("0 tasks", size=13, color=UI.theme.text_subtle)
        self.list_view = ft.ListView(expand=True, spacing=10)

        self.view = ft.Container(
            expand=True,
            content=ft.Column(
                [
                    ft.Row(
                        [ft.Text("Tasks", size=18, weight=ft.FontWeight.W_600), self.count_text],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    self.list_view,
                ],
                spacing=10,
                expand=True,
            ),
        )

    # ---------- Rendering ----------
    def render(self, tasks: Sequence[TaskRead], *, loading: bool = False) -> None:
        self._tasks = list(tasks)
        self.count_text.value = f"{len(self._tasks)} tasks"
        if loading:
            self.list_view.controls = [self._loading_state()]
        elif not self._tasks:
            self.list_view.controls = [self._empty_state()]
        else:
            self.list_view.controls = [self._row_for_task(t) for t in self._tasks]
        if self.view.page:
            self.view.update()

    def _loading_state(self) -> ft.Control:
        return ft.Row(
            [ft.ProgressRing(width=18, height=18, stroke_width=2), ft.Text("Loading...")],
            spacing=10,
        )

    def _empty_state(self) -> ft.Control:
        return ft.Container(
            padding=ft.padding.symmetric(vertical=8, horizontal=12),
            content=ft.Row(
                [
                    ft.Icon(ft.Icons.INFO_OUTLINE, color=ft.Colors.BLUE_GREY_300),
                    ft.Text("No tasks yet", color=ft.Colors.BLUE_GREY_400),
                ],
                spacing=8,
            ),
        )

    def _row_for_task(self, t: TaskRead) -> ft.Control:
        checkbox = ft.Checkbox(value=t.completed, data=t.id, on_change=self._on_toggle_click)

        title = ft.Text(
            t.title,
            tooltip=t.title,
            size=15,
            weight=ft.FontWeight.W_600,
            max_lines=2,
            overflow=ft.TextOverflow.ELLIPSIS,
            color=UI.theme.completed_text if t.completed else None,
            style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH if t.completed else None),
        )

        priority_chip = ft.Container(
            content=ft.Text(priority_label(t.priority), size=12, weight=ft.FontWeight.W_500,
                            color=priority_color(t.priority)),
            bgcolor=priority_bgcolor(t.priority),
            padding=ft.padding.symmetric(horizontal=10, vertical=4),
            border_radius=999,
        )
        meta_items: list[ft.Control] = [priority_chip]
        if t.due_date:
            meta_items.append(
                ft.Row(
                    [ft.Icon(ft.Icons.EVENT, size=14), ft.Text(date_only(t.due_date), size=12)],
                    spacing=4,
                )
            )
        meta_items.append(ft.Text(local_display(t.created_at), size=12, color=ft.Colors.BLUE_GREY_400))

        info: list[ft.Control] = [title]
        if t.description:
            info.append(ft.Text(t.description, size=13, color=UI.theme.text_subtle))
        info.append(ft.Row(meta_items, spacing=12, wrap=True))

        actions = ft.Row(
            controls=[
                ft.IconButton(
                    icon=ft.Icons.EDIT_OUTLINED,
                    tooltip="Edit",
                    data=t.id,
                    on_click=self._on_edit_click,
                ),
                ft.IconButton(
                    icon=ft.Icons.DELETE_OUTLINE,
                    tooltip="Delete",
                    data=t.id,
                    on_click=self._on_delete_click,
                ),
            ],
            spacing=4,
        )

        return ft.Container(
            content=ft.Row(
                [
                    ft.Container(width=42, alignment=ft.alignment.center, content=checkbox),
                    ft.Column(info, spacing=4, expand=True),
                    actions,
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=ft.padding.symmetric(horizontal=12, vertical=10),
            border_radius=12,
            bgcolor=ft.Colors.SURFACE,
            border=ft.border.all(1, ft.Colors.with_opacity(0.08, ft.Colors.ON_SURFACE)),
        )

    # ---------- Intents ----------
    def _find(self, task_id: str) -> Optional[TaskRead]:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    async def _on_toggle_click(self, e: ft.ControlEvent):
        task = self._find(e.control.data)
        if task is None:
            return
        try:
            await self.on_toggle(task)
        except Exception:
            # the checkbox already flipped on the client; show the real flag again
            self.render(self._tasks)
            raise

    def _on_edit_click(self, e: ft.ControlEvent):
        task = self._find(e.control.data)
        if task is not None:
            self.on_edit(task)

    async def _on_delete_click(self, e: ft.ControlEvent):
        await self.on_delete(e.control.data)


__all__ = ["TaskListView"]
