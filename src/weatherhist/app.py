# tkinter window: two dropdowns, a status line and a scrollable list of day cards
# network work runs on daemon threads, status changes come back to tk through after()

from __future__ import annotations
import logging
import threading
import tkinter as tk
from tkinter import ttk
from typing import Callable
from .models import CITIES, Parameter, Status
from .view import Rendered, WeatherView

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Weather in Lviv Region"
ERROR_COLOR = "#b00020"


def thread_runner(work: Callable[[], object]) -> None:
    # one worker per fetch cycle
    threading.Thread(target=work, daemon=True, name="fetch-cycle").start()


class WeatherWindow(tk.Tk):
    def __init__(self, view: WeatherView):
        super().__init__()
        self.view = view
        self._closed = False
        self.title(WINDOW_TITLE)
        self.geometry("460x560")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.city_var = tk.StringVar(value=view.city)
        self.param_var = tk.StringVar(value=view.parameter.value)

        self._build_ui()
        view.orchestrator.subscribe(self._on_status)

    def _build_ui(self) -> None:
        root = ttk.Frame(self, padding=16)
        root.pack(fill="both", expand=True)

        self.heading = ttk.Label(root, font=("TkDefaultFont", 16, "bold"))
        self.heading.pack(anchor="w", pady=(0, 8))

        controls = ttk.Frame(root)
        controls.pack(fill="x")
        self._selector(controls, "City", self.city_var, list(CITIES), self._city_changed)
        self._selector(controls, "Parameter", self.param_var, [p.value for p in Parameter], self._param_changed)

        self.status_label = tk.Label(root, anchor="w", justify="left", wraplength=420)
        self.status_label.pack(fill="x", pady=(16, 4))
        self._default_fg = self.status_label.cget("fg")

        # canvas + inner frame gives a scrollable column of cards
        body = ttk.Frame(root)
        body.pack(fill="both", expand=True)
        self.canvas = tk.Canvas(body, highlightthickness=0)
        scroll = ttk.Scrollbar(body, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scroll.set)
        scroll.pack(side="right", fill="y")
        self.canvas.pack(side="left", fill="both", expand=True)

        self.cards = ttk.Frame(self.canvas)
        self._cards_window = self.canvas.create_window((0, 0), window=self.cards, anchor="nw")
        self.cards.bind("<Configure>", lambda e: self.canvas.configure(scrollregion=self.canvas.bbox("all")))
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(self._cards_window, width=e.width))

    def _selector(self, parent, label: str, var: tk.StringVar, values, on_change) -> None:
        box = ttk.Frame(parent)
        box.pack(side="left", padx=(0, 16))
        ttk.Label(box, text=label).pack(anchor="w")
        cb = ttk.Combobox(box, textvariable=var, values=values, state="readonly", width=16)
        cb.pack(anchor="w")
        cb.bind("<<ComboboxSelected>>", lambda e: on_change())

    def _city_changed(self) -> None:
        self.view.select_city(self.city_var.get())
        self.refresh()

    def _param_changed(self) -> None:
        self.view.select_parameter(Parameter(self.param_var.get()))
        self.refresh()

    def _on_status(self, status: Status) -> None:
        # called from worker threads, tk must only be touched on its own thread
        if self._closed:
            return
        try:
            self.after(0, self.refresh)
        except (RuntimeError, tk.TclError) as exc:
            logger.debug("Window gone, dropping status update: %s", exc)

    def refresh(self) -> None:
        if self._closed:
            return
        self.draw(self.view.render())

    def draw(self, rendered: Rendered) -> None:
        self.heading.configure(text=rendered.heading)
        self.status_label.configure(
            text=rendered.message,
            fg=ERROR_COLOR if rendered.is_error else self._default_fg,
        )

        for child in self.cards.winfo_children():
            child.destroy()
        for card in rendered.cards:
            frame = ttk.LabelFrame(self.cards, padding=8)
            frame.pack(fill="x", padx=4, pady=4)
            ttk.Label(frame, text=f"Date: {card.date}").pack(anchor="w")
            ttk.Label(frame, text=f"Condition: {card.condition}").pack(anchor="w")
            ttk.Label(frame, text=card.value).pack(anchor="w")
        self.canvas.yview_moveto(0)

    def _on_close(self) -> None:
        self._closed = True
        self.destroy()

    def run(self) -> None:
        self.view.start()
        self.refresh()
        self.mainloop()
