"""Боковая панель: seed, параметры генерации, информация и курсор.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from identigen.config import GRID_SIZE, IMAGE_SIZE, PADDING, Bounds
from identigen.models.identicon_model import Identicon, IdenticonParams
from identigen.services.render_service import Layout


def _rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: seed, параметры, информация, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_params_change: Optional[Callable[[], None]] = None
        self.on_save_file: Optional[Callable[[], None]] = None

        # Seed
        self._title = ctk.CTkLabel(self, text="Seed", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._seed_val = ctk.StringVar(value="")
        self._seed_entry = ctk.CTkEntry(self, textvariable=self._seed_val, placeholder_text="имя, email, ключ…")
        self._seed_entry.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")
        self._seed_entry.bind("<KeyRelease>", self._emit_params_change)

        # Parameters
        self._params_title = ctk.CTkLabel(self, text="Параметры", font=ctk.CTkFont(size=16, weight="bold"))
        self._params_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._size_slider, self._size_val = self._add_slider(3, "Размер, px:", IMAGE_SIZE)
        self._grid_slider, self._grid_val = self._add_slider(6, "Сетка, ячеек:", GRID_SIZE)
        self._padding_slider, self._padding_val = self._add_slider(9, "Отступ, %:", PADDING)

        self._save_btn = ctk.CTkButton(self, text="Сохранить PNG…", command=self._emit_save_file)
        self._save_btn.grid(row=12, column=0, padx=8, pady=(8, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=13, column=0, padx=8, pady=(8, 4), sticky="w")

        self._color_val = ctk.StringVar(value="—")
        self._digest_val = ctk.StringVar(value="—")
        self._grid_info_val = ctk.StringVar(value="—")
        self._layout_val = ctk.StringVar(value="—")

        self._color_swatch = ctk.CTkLabel(self, text="", width=24, height=24, corner_radius=4, fg_color="transparent")
        self._info_color = ctk.CTkLabel(self, textvariable=self._color_val, anchor="w", justify="left")
        self._info_digest = ctk.CTkLabel(self, textvariable=self._digest_val, wraplength=250, anchor="w", justify="left")
        self._info_grid = ctk.CTkLabel(self, textvariable=self._grid_info_val, anchor="w", justify="left")
        self._info_layout = ctk.CTkLabel(self, textvariable=self._layout_val, anchor="w", justify="left")

        self._color_swatch.grid(row=14, column=0, padx=8, pady=(0, 2), sticky="e")
        self._info_color.grid(row=14, column=0, padx=8, pady=(0, 2), sticky="w")
        self._info_digest.grid(row=15, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_grid.grid(row=16, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_layout.grid(row=17, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=18, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgb_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")

        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgb = ctk.CTkLabel(self, textvariable=self._cursor_rgb_val, anchor="w", justify="left")
        self._cursor_hex = ctk.CTkLabel(self, textvariable=self._cursor_hex_val, anchor="w", justify="left")

        self._cursor_xy.grid(row=19, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgb.grid(row=20, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_hex.grid(row=21, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def get_seed(self) -> str:
        return self._seed_val.get()

    def set_seed(self, seed: str) -> None:
        self._seed_val.set(seed)

    def get_params(self) -> IdenticonParams:
        """Возвращает текущие параметры, округлённые до целых в пределах слайдеров."""
        return IdenticonParams(
            image_size=self._slider_value(self._size_slider, IMAGE_SIZE),
            grid_size=self._slider_value(self._grid_slider, GRID_SIZE),
            padding_percent=self._slider_value(self._padding_slider, PADDING),
        )

    def set_identicon_info(self, identicon: Identicon, layout: Layout, usable_rows: int) -> None:
        """Отображает цвет, дайджест и геометрию текущего identicon."""
        color = identicon.color
        self._color_val.set(f"Цвет: {color.hex}  ({color.r}, {color.g}, {color.b})")
        self._color_swatch.configure(fg_color=color.hex)
        self._digest_val.set(f"SHA-256: {identicon.digest_hex}")
        grid = identicon.grid
        rows_note = "" if usable_rows >= grid.size else f", бит хватает на {usable_rows} строк"
        self._grid_info_val.set(f"Сетка: {grid.size}×{grid.size}, закрашено {grid.filled_count()}{rows_note}")
        self._layout_val.set(f"Ячейка: {layout.cell_size} px, смещение {layout.offset} px")

    def clear_identicon_info(self) -> None:
        for var in (self._color_val, self._digest_val, self._grid_info_val, self._layout_val):
            var.set("—")
        self._color_swatch.configure(fg_color="transparent")

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGB, HEX)."""
        if x is None or y is None or rgb is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgb_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b = rgb
        self._cursor_rgb_val.set(f"RGB: {r}, {g}, {b}")
        self._cursor_hex_val.set(f"HEX: {_rgb_to_hex(rgb)}")

    # ---- Events ----
    def _emit_params_change(self, _value: object | None = None) -> None:
        if self.on_params_change:
            self.on_params_change()

    def _emit_save_file(self) -> None:
        if self.on_save_file:
            self.on_save_file()

    # ---- Helpers ----
    def _add_slider(self, row: int, text: str, bounds: Bounds) -> Tuple[ctk.CTkSlider, ctk.StringVar]:
        value_var = ctk.StringVar(value=str(bounds.default))
        label = ctk.CTkLabel(self, text=text)

        def on_change(value: float) -> None:
            value_var.set(str(int(round(value))))
            self._emit_params_change()

        slider = ctk.CTkSlider(
            self,
            from_=bounds.low,
            to=bounds.high,
            number_of_steps=bounds.high - bounds.low,
            command=on_change,
        )
        slider.set(bounds.default)
        value_label = ctk.CTkLabel(self, textvariable=value_var, width=48, anchor="w")

        label.grid(row=row, column=0, padx=8, pady=(0, 2), sticky="w")
        slider.grid(row=row + 1, column=0, padx=8, pady=(0, 2), sticky="ew")
        value_label.grid(row=row + 2, column=0, padx=8, pady=(0, 6), sticky="w")
        return slider, value_var

    def _slider_value(self, slider: ctk.CTkSlider, bounds: Bounds) -> int:
        try:
            value = int(round(float(slider.get())))
        except (TypeError, ValueError):
            value = bounds.default
        return max(bounds.low, min(bounds.high, value))
