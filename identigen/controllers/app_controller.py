"""Контроллер студии: оркестрация UI и сервисов генерации.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики генерации).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from tkinter import filedialog, TclError
from typing import Optional, Tuple

import customtkinter as ctk

from identigen.config import IdenticonConfigError
from identigen.models.identicon_model import Identicon
from identigen.services.identicon_service import IdenticonService
from identigen.services.image_service import ImageService
from identigen.services.pattern_service import PatternService
from identigen.services.render_service import RenderService
from identigen.ui.image_viewer import ImageViewer
from identigen.ui.sidebar import Sidebar
from identigen.ui.bottom_bar import BottomBar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с генерацией identicon.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Перегенерация через `IdenticonService` при любом изменении параметров.
    - Сохранение через `ImageService`.
    - Синхронизация состояния зума.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk

    _identicon_service: IdenticonService = IdenticonService()
    _image_service: ImageService = ImageService()
    _pattern_service: PatternService = PatternService()
    _render_service: RenderService = RenderService()
    _current: Optional[Identicon] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_params_change = self._handle_params_change
        self.sidebar.on_save_file = self._handle_save_file
        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    def regenerate(self, reset_zoom: bool = False) -> None:
        """Генерирует identicon по текущим значениям сайдбара и показывает его."""
        seed = self.sidebar.get_seed()
        params = self.sidebar.get_params()
        try:
            identicon = self._identicon_service.create_identicon(seed, params)
        except IdenticonConfigError as exc:
            logger.warning("Cannot render identicon: %s", exc)
            self._current = None
            self.viewer.clear()
            self.sidebar.clear_identicon_info()
            self.bottom.set_status(str(exc), error=True)
            return

        self._current = identicon
        layout = self._render_service.compute_layout(params.image_size, params.grid_size, params.padding_percent)
        usable = self._pattern_service.usable_rows(len(identicon.digest), params.grid_size)
        self.sidebar.set_identicon_info(identicon, layout, usable)
        self.viewer.set_image(identicon.image, keep_zoom=not reset_zoom)
        self.bottom.set_status("")
        if reset_zoom:
            self._sync_zoom()

    # ---- Handlers ----
    def _handle_params_change(self) -> None:
        size_changed = self._current is not None and self._current.params.image_size != self.sidebar.get_params().image_size
        self.regenerate(reset_zoom=size_changed)

    def _handle_save_file(self) -> None:
        if self._current is None:
            self.bottom.set_status("Нечего сохранять", error=True)
            return
        default_path = self._image_service.default_output_path(self._current.seed)
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить identicon",
                initialfile=default_path.name,
                defaultextension=".png",
                filetypes=(("PNG", "*.png"), ("All files", "*.*")),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            saved = self._image_service.save_image(self._current.image, file_path)
        except OSError as exc:
            logger.error("Failed to save image: %s", exc)
            self.bottom.set_status(f"Ошибка сохранения: {exc}", error=True)
            return
        self.bottom.set_status(f"Сохранено: {saved.path}")

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgb)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # Sync bottom slider when user zooms with mouse wheel
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self._sync_zoom()

    # ---- Helpers ----
    def _sync_zoom(self) -> None:
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())
