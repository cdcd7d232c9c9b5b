# taskboard/ui/task_form.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Awaitable, Callable, Dict, Optional

import flet as ft

from core.priorities import DEFAULT_PRIORITY, normalize_priority, priority_options
from core.settings import UI
from models.schemas import TaskRead
from utils.datetime_utils import date_only, parse_date_input

SaveFn = Callable[[Dict[str, Any]], Awaitable[Any]]


class FormValidationError(ValueError):
    pass


@dataclass(frozen=True)
class FormValues:
    title: str = ""
    description: str = ""
    priority: str = DEFAULT_PRIORITY.value
    due_date: str = ""   # YYYY-MM-DD as typed / picked


def values_from_task(task: Optional[TaskRead]) -> FormValues:
    if task is None:
        return FormValues()
    return FormValues(
        title=task.title or "",
        description=task.description or "",
        priority=normalize_priority(task.priority).value,
        due_date=date_only(task.due_date),
    )


def build_payload(values: FormValues) -> Dict[str, Any]:
    """Normalize form values into the create/update body, or raise FormValidationError."""
    title = (values.title or "").strip()
    if not title:
        raise FormValidationError("Please enter a title")

    due_text = (values.due_date or "").strip()
    due: Optional[date] = parse_date_input(due_text)
    if due_text and due is None:
        raise FormValidationError("Invalid date. Example: 2025-10-10")

    return {
        "title": title,
        "description": (values.description or "").strip(),
        "priority": normalize_priority(values.priority).value,
        "dueDate": due.isoformat() if due else None,
    }


class TaskForm:
    """Create/edit form. ``set_initial`` switches between the two modes."""

    def __init__(
        self,
        on_save: SaveFn,
        *,
        notify: Callable[[str], None],
        on_cancel_edit: Optional[Callable[[], None]] = None,
    ):
        self.on_save = on_save
        self.notify = notify
        self.on_cancel_edit = on_cancel_edit
        self.initial: Optional[TaskRead] = None

        self.heading = ft.Text("New task", size=18, weight=ft.FontWeight.W_600)
        self.title_tf = ft.TextField(
            label="Title",
            hint_text="e.g. Review today's project",
            prefix=ft.Icon(ft.Icons.TASK_ALT),
        )
        self.description_tf = ft.TextField(
            label="Description (optional)",
            multiline=True,
            min_lines=2,
            max_lines=4,
        )
        self.priority_dd = ft.Dropdown(
            label="Priority",
            expand=True,
            value=DEFAULT_PRIORITY.value,
            options=[ft.dropdown.Option(key, label) for key, label in priority_options().items()],
        )
        self.due_tf = ft.TextField(label="Due date", hint_text="YYYY-MM-DD", expand=True)
        self.date_picker = ft.DatePicker(
            first_date=date(2000, 1, 1),
            last_date=date(2100, 12, 31),
            on_change=self._on_date_picked,
        )
        self.date_btn = ft.IconButton(
            icon=ft.Icons.CALENDAR_MONTH,
            tooltip="Pick a date",
            on_click=lambda e: e.page.open(self.date_picker),
        )
        self.save_btn = ft.FilledButton("Save task", icon=ft.Icons.SAVE, on_click=self._on_submit)
        self.cancel_btn = ft.TextButton("Cancel edit", visible=False, on_click=self._on_cancel)

        self.view = ft.Card(
            content=ft.Container(
                width=UI.form_width,
                padding=16,
                content=ft.Column(
                    [
                        self.heading,
                        self.title_tf,
                        self.description_tf,
                        ft.Row(
                            [self.priority_dd, ft.Row([self.due_tf, self.date_btn], spacing=6, expand=True)],
                            spacing=12,
                            vertical_alignment=ft.CrossAxisAlignment.END,
                        ),
                        ft.Row([self.cancel_btn, self.save_btn], alignment=ft.MainAxisAlignment.END),
                    ],
                    spacing=12,
                    tight=True,
                ),
            )
        )

    # ---------- values ----------
    @property
    def values(self) -> FormValues:
        return FormValues(
            title=self.title_tf.value or "",
            description=self.description_tf.value or "",
            priority=self.priority_dd.value or DEFAULT_PRIORITY.value,
            due_date=self.due_tf.value or "",
        )

    def _apply(self, values: FormValues) -> None:
        self.title_tf.value = values.title
        self.description_tf.value = values.description
        self.priority_dd.value = values.priority
        self.due_tf.value = values.due_date

    @property
    def is_editing(self) -> bool:
        return self.initial is not None

    def set_initial(self, task: Optional[TaskRead]) -> None:
        """Repopulate from ``task`` (edit mode) or reset to defaults (create mode).

        No-op when the same object is passed again, so unrelated state
        changes do not wipe what the user is typing.
        """
        if task is self.initial:
            return
        self.initial = task
        self._apply(values_from_task(task))
        self.heading.value = "Edit task" if task else "New task"
        self.cancel_btn.visible = task is not None
        self._update()

    def reset(self) -> None:
        self._apply(FormValues())
        self._update()

    # ---------- submit ----------
    async def submit(self) -> bool:
        """Validate and hand the payload to ``on_save``; False if validation failed.

        Errors raised by ``on_save`` propagate and leave the fields as typed.
        """
        try:
            payload = build_payload(self.values)
        except FormValidationError as exc:
            self.notify(str(exc))
            return False

        self.save_btn.disabled = True
        self._update()
        try:
            await self.on_save(payload)
        finally:
            self.save_btn.disabled = False
            self._update()
        self.reset()
        return True

    async def _on_submit(self, _):
        await self.submit()

    def _on_cancel(self, _):
        if self.on_cancel_edit:
            self.on_cancel_edit()

    def _on_date_picked(self, e: ft.ControlEvent):
        picked = e.control.value
        if picked:
            self.due_tf.value = date_only(picked)
            self._update()

    def _update(self) -> None:
        if self.view.page:
            self.view.update()


__all__ = ["FormValidationError", "FormValues", "TaskForm", "build_payload", "values_from_task"]
