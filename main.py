# taskboard/main.py
import flet as ft

from core.logging_setup import setup_logging
from core.settings import APP_NAME, UI
from ui.app_shell import AppShell


def main(page: ft.Page):
    page.title = UI.app_title
    page.theme_mode = UI.theme_mode
    page.theme = ft.Theme(color_scheme_seed=UI.color_scheme_seed)
    page.appbar = ft.AppBar(title=ft.Text(APP_NAME), center_title=False)
    page.padding = 0
    page.window.min_width = UI.window_min_width
    page.window.min_height = UI.window_min_height

    shell = AppShell(page)

    async def _on_disconnect(_):
        await shell.close()

    page.on_disconnect = _on_disconnect
    shell.mount()


def run():
    setup_logging()
    ft.app(target=main)


if __name__ == "__main__":
    run()
