from __future__ import annotations

import customtkinter as ctk

from identigen.controllers.app_controller import AppController
from identigen.ui.image_viewer import ImageViewer
from identigen.ui.sidebar import Sidebar
from identigen.ui.bottom_bar import BottomBar


class IdenticonStudioApp(ctk.CTk):
    def __init__(self, seed: str = "") -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Identicon Studio")
        self.minsize(900, 600)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))
        self._sidebar.set_seed(seed)

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, window=self)
        self._controller.bind_events()
        # first render once the canvas has its real size
        self.after(50, lambda: self._controller.regenerate(reset_zoom=True))
