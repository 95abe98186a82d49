"""Tkinter GUI application for the breakpoint chart."""
from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox, scrolledtext, ttk
from typing import Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from ..benefit import DEFAULT_FIRST_BEND, DEFAULT_SECOND_BEND, BendPointFormula
from ..chart import BreakpointChart
from ..errors import ChartError
from ..interaction import PointerEvent, TrackingState
from ..parsing import parse_bend_points, parse_dollars
from ..reporting import export_samples_csv, probe_table
from ..sampling import HAS_NUMPY, sample_curve
from ..surface import MatplotlibSurface

CHART_WIDTH = 720
CHART_HEIGHT = 360


class App(tk.Tk):
    def __init__(self) -> None:
        super().__init__()
        self.title("Benefit Breakpoints")
        self.geometry("800x640")
        self._status_var = tk.StringVar(value="")
        self._model: Optional[BendPointFormula] = None

        self.surface = MatplotlibSurface(CHART_WIDTH, CHART_HEIGHT)
        self.chart = BreakpointChart()

        self._build_inputs()
        self._build_buttons()
        self._build_chart()
        self._build_text()
        self._render_clicked()

    def _build_inputs(self) -> None:
        standard = ttk.LabelFrame(self, text="Benefit Formula")
        standard.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)
        for col in (1, 3):
            standard.grid_columnconfigure(col, weight=1)

        ttk.Label(standard, text="Monthly indexed earnings:").grid(row=0, column=0, sticky="w")
        self.ent_earnings = ttk.Entry(standard, width=12)
        self.ent_earnings.insert(0, "3,000")
        self.ent_earnings.grid(row=0, column=1, padx=6, pady=4, sticky="w")
        self.ent_earnings.bind("<Return>", lambda _e: self._render_clicked())

        ttk.Label(standard, text="Bend points (first; second):").grid(row=0, column=2, sticky="w")
        self.ent_bends = ttk.Entry(standard, width=20)
        self.ent_bends.insert(0, f"{DEFAULT_FIRST_BEND:,.0f}; {DEFAULT_SECOND_BEND:,.0f}")
        self.ent_bends.grid(row=0, column=3, padx=6, pady=4, sticky="w")
        self.ent_bends.bind("<Return>", lambda _e: self._render_clicked())

        ttk.Label(
            standard,
            text="Click the chart to pause or resume the probe that follows the pointer.",
        ).grid(row=1, column=0, columnspan=4, sticky="w", pady=(0, 4))

    def _build_buttons(self) -> None:
        frm = ttk.Frame(self)
        frm.pack(side=tk.TOP, fill=tk.X, padx=8, pady=(0, 6))
        ttk.Button(frm, text="Render", command=self._render_clicked).pack(side=tk.LEFT, padx=4)
        ttk.Button(frm, text="Export Curve CSV", command=self._export_csv).pack(
            side=tk.LEFT, padx=4
        )
        ttk.Label(frm, textvariable=self._status_var).pack(side=tk.RIGHT, padx=4)

    def _build_chart(self) -> None:
        frm = ttk.Frame(self)
        frm.pack(side=tk.TOP, padx=8, pady=6)
        self.canvas = FigureCanvasTkAgg(self.surface.figure, master=frm)
        self.canvas.get_tk_widget().pack(side=tk.TOP)
        # Route pointer events through the app so failures reach the user.
        self.chart.set_surface(self.surface, connect=False)
        self.surface.connect(self._on_click, self._on_move)

    def _build_text(self) -> None:
        frm = ttk.LabelFrame(self, text="Summary")
        frm.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=6)
        self.txt = scrolledtext.ScrolledText(frm, wrap="word", height=6)
        self.txt.pack(fill=tk.BOTH, expand=True)

    def _update_status(self) -> None:
        if self.chart.tracking_state is TrackingState.TRACKING:
            self._status_var.set("Tracking pointer")
        else:
            self._status_var.set("Paused (click to resume)")

    def _read_model(self) -> BendPointFormula:
        first, second = parse_bend_points(self.ent_bends.get())
        return BendPointFormula(
            monthly_indexed_earnings=parse_dollars(self.ent_earnings.get()),
            first_bend=first,
            second_bend=second,
        )

    def _render_clicked(self) -> None:
        try:
            model = self._read_model()
            self.chart.replace_benefit_model(model)
        except (ChartError, ValueError) as exc:
            messagebox.showerror("Error", str(exc))
            return
        self._model = model
        self.canvas.draw_idle()
        self._update_status()
        viewport = self.chart.viewport
        rows = [
            (self._model.monthly_indexed_earnings,
             self._model.primary_insurance_amount_for_earnings(self._model.monthly_indexed_earnings)),
            (viewport.max_rendered_x_dollars(), viewport.max_rendered_y_dollars()),
        ]
        self.txt.delete("1.0", "end")
        self.txt.insert("end", "Subject and chart extent\n")
        self.txt.insert("end", "\n".join(probe_table(rows)) + "\n")

    def _on_click(self, event: PointerEvent) -> None:
        if not self.chart.is_initialized():
            return
        try:
            self.chart.on_click(event)
        except ChartError as exc:
            messagebox.showerror("Error", str(exc))
        self._update_status()

    def _on_move(self, event: PointerEvent) -> None:
        if not self.chart.is_initialized():
            return
        try:
            self.chart.on_move(event)
        except ChartError as exc:
            self._status_var.set(f"Error: {exc}")

    def _export_csv(self) -> None:
        if self._model is None:
            messagebox.showinfo("Export", "Render the chart first.")
            return
        path = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=[("CSV", "*.csv")])
        if not path:
            return
        try:
            max_x = self.chart.viewport.max_rendered_x_dollars()
            export_samples_csv(path, sample_curve(self._model, max_x, 21, HAS_NUMPY))
        except (ChartError, OSError) as exc:
            messagebox.showerror("Error", str(exc))
            return
        messagebox.showinfo("Export", f"Saved curve samples to {path}")


def run() -> None:
    App().mainloop()


__all__ = ["run", "App"]
