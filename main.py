import logging
import tkinter as tk
from tkinter import filedialog, messagebox, simpledialog

from PIL import ImageTk

import viewer_style as style
from decoders import decode_file
from display import plot_histogram_image, to_pil_image
from errors import ImageError
from point_operations import PointOperation, apply_operation
from rgba_image import RGBAImage

logger = logging.getLogger(__name__)


class ImageApp(tk.Tk):
    def __init__(self, file_path=None):
        super().__init__()
        self.title(style.APP_TITLE)
        self.geometry(style.APP_GEOMETRY)
        self.configure(bg=style.BG_MAIN)

        # Menu
        menubar = tk.Menu(self)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Open Image", command=self.open_image)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.quit)
        menubar.add_cascade(label="File", menu=file_menu)

        ops_menu = tk.Menu(menubar, tearoff=0)
        ops_menu.add_command(label="Grayscale", command=lambda: self.run_operation(PointOperation.GRAYSCALE))
        ops_menu.add_command(label="Invert", command=lambda: self.run_operation(PointOperation.INVERT))
        ops_menu.add_command(label="Threshold...", command=self.ask_threshold)
        ops_menu.add_separator()
        ops_menu.add_command(label="Reset", command=self.reset_image)
        menubar.add_cascade(label="Operations", menu=ops_menu)

        view_menu = tk.Menu(menubar, tearoff=0)
        view_menu.add_command(label="Histograms", command=self.show_histograms)
        view_menu.add_command(label="Zoom In", command=self.zoom_in)
        view_menu.add_command(label="Zoom Out", command=self.zoom_out)
        menubar.add_cascade(label="View", menu=view_menu)
        self.config(menu=menubar)

        # === Top Toolbar ===
        toolbar = tk.Frame(self, bg=style.BG_TOOLBAR, padx=10, pady=8)
        toolbar.pack(side="top", fill="x")
        self.toolbar_buttons = {}
        for text, command in [
            ("Open Image", self.open_image),
            ("Grayscale", lambda: self.run_operation(PointOperation.GRAYSCALE)),
            ("Invert", lambda: self.run_operation(PointOperation.INVERT)),
            ("Threshold", self.ask_threshold),
            ("Histograms", self.show_histograms),
        ]:
            btn = tk.Button(toolbar, text=text, command=command,
                            bg=style.BG_BUTTON, fg=style.FG_BUTTON,
                            font=style.FONT_BUTTON, relief="flat", padx=10, pady=4)
            btn.pack(side="left", padx=5)
            self.toolbar_buttons[text] = btn

        # === Main Content Layout ===
        main_frame = tk.Frame(self, bg=style.BG_MAIN)
        main_frame.pack(fill="both", expand=True, padx=10, pady=10)

        canvas_frame = tk.Frame(main_frame, bg=style.BG_MAIN)
        canvas_frame.pack(side="left", fill="both", expand=True, padx=(0, 10))
        self.canvas = tk.Canvas(canvas_frame, bg=style.BG_PANEL, cursor="cross")
        self.canvas.pack(side="left", fill="both", expand=True)
        self.scroll_y = tk.Scrollbar(canvas_frame, orient="vertical", command=self.canvas.yview)
        self.scroll_y.pack(side="right", fill="y")
        self.scroll_x = tk.Scrollbar(main_frame, orient="horizontal", command=self.canvas.xview)
        self.scroll_x.pack(side="bottom", fill="x")
        self.canvas.configure(yscrollcommand=self.scroll_y.set, xscrollcommand=self.scroll_x.set)

        self.canvas.bind("<Button-1>", self.get_pixel_info)
        self.canvas.bind("<MouseWheel>", self.on_mousewheel)
        self.canvas.bind("<Button-4>", self.on_mousewheel_linux)
        self.canvas.bind("<Button-5>", self.on_mousewheel_linux)

        # === Info Panel ===
        info_frame = tk.Frame(main_frame, bg=style.BG_PANEL, bd=2, relief="groove", padx=15, pady=15)
        info_frame.pack(side="right", fill="y")
        tk.Label(info_frame, text="Pixel Info", font=style.FONT_HEADER,
                 bg=style.BG_PANEL, fg=style.FG_TEXT).pack(anchor="w", pady=(0, 5))
        self.pixel_label = tk.Label(info_frame, text="Click on the image to view pixel RGBA values.",
                                    font=style.FONT_TEXT, justify="left",
                                    bg=style.BG_PANEL, fg=style.FG_SUBTEXT)
        self.pixel_label.pack(anchor="w", pady=(0, 10))
        self.color_preview = tk.Canvas(info_frame, width=80, height=50, bg="#cccccc", bd=1, relief="solid")
        self.color_preview.pack(anchor="w", pady=(0, 20))
        tk.Label(info_frame, text="Header Info", font=style.FONT_HEADER,
                 bg=style.BG_PANEL, fg=style.FG_TEXT).pack(anchor="w", pady=(0, 5))
        self.header_text = tk.Text(info_frame, height=12, width=36, font=style.FONT_MONO,
                                   bg="#f9f9f9", fg="#222", relief="flat", wrap="none")
        self.header_text.pack(anchor="w", pady=(0, 5))
        self.header_text.configure(state="disabled")

        # === Initialize Variables ===
        self.image = None
        self.original = None
        self.tk_img = None
        self.hist_refs = []
        self.zoom_factor = 1.0
        if file_path:
            self.load_image(file_path)

    # === File Handling ===
    def open_image(self):
        file_path = filedialog.askopenfilename(filetypes=style.IMAGE_FILETYPES)
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path):
        try:
            decoded = decode_file(file_path)
            self.original = RGBAImage.from_bytes(decoded.data, decoded.layout,
                                                 decoded.width, decoded.height)
        except ImageError as e:
            logger.error(f"Failed to open {file_path}: {e}")
            messagebox.showerror("Error", f"Failed to open image:\n{e}")
            return
        self.image = self.original.copy()
        self.zoom_factor = 1.0
        self.show_header_info(decoded.info)
        self.display_image()

    # === Operations ===
    def run_operation(self, op, limit=None):
        if self.image is None:
            return
        apply_operation(self.image, op, limit)
        logger.info(f"Applied {op.value}" + (f" (limit={limit})" if limit is not None else ""))
        self.display_image()

    def ask_threshold(self):
        limit = simpledialog.askinteger("Threshold", "Limit (0-255):", parent=self,
                                        initialvalue=style.DEFAULT_THRESHOLD,
                                        minvalue=0, maxvalue=255)
        if limit is not None:
            self.run_operation(PointOperation.THRESHOLD, limit)

    def reset_image(self):
        if self.original is not None:
            self.image = self.original.copy()
            self.display_image()

    # === Display & Zoom ===
    def display_image(self):
        if self.image is None:
            return
        width, height = self.image.dimensions()
        pil_img = to_pil_image(self.image.export_display_buffer(), width, height)
        w = max(1, int(width * self.zoom_factor))
        h = max(1, int(height * self.zoom_factor))
        self.tk_img = ImageTk.PhotoImage(pil_img.resize((w, h)))
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor="nw", image=self.tk_img)
        self.canvas.config(scrollregion=self.canvas.bbox("all"))

    def zoom_in(self):
        self.zoom_factor *= style.ZOOM_STEP
        self.display_image()

    def zoom_out(self):
        self.zoom_factor /= style.ZOOM_STEP
        self.display_image()

    def on_mousewheel(self, event):
        if event.delta > 0:
            self.zoom_in()
        else:
            self.zoom_out()

    def on_mousewheel_linux(self, event):
        if event.num == 4:
            self.zoom_in()
        elif event.num == 5:
            self.zoom_out()

    # === Pixel Info ===
    def get_pixel_info(self, event):
        if self.image is None:
            return
        x = int(self.canvas.canvasx(event.x) / self.zoom_factor)
        y = int(self.canvas.canvasy(event.y) / self.zoom_factor)
        if 0 <= x < self.image.width and 0 <= y < self.image.height:
            r, g, b, a = self.image.get_pixel_unpacked(x, y)
            self.pixel_label.config(text=f"X: {x}\nY: {y}\nR: {r}\nG: {g}\nB: {b}\nA: {a}")
            self.color_preview.config(bg=f"#{r:02x}{g:02x}{b:02x}")

    # === Header Info ===
    def show_header_info(self, info):
        text = "\n".join(f"{k}: {v}" for k, v in info.items())
        self.header_text.configure(state="normal")
        self.header_text.delete("1.0", "end")
        self.header_text.insert("1.0", text)
        self.header_text.configure(state="disabled")

    # === Histograms ===
    def show_histograms(self):
        if self.image is None:
            return
        win = tk.Toplevel(self)
        win.title(style.HISTOGRAM_TITLE)
        win.configure(bg=style.BG_MAIN)
        self.hist_refs.clear()

        for name, hist, color in zip("RGB", self.image.histogram(), style.CHANNEL_COLORS):
            frame = tk.Frame(win, bg=style.BG_MAIN)
            frame.pack(side="left", padx=5, pady=5)
            tk.Label(frame, text=f"{name} Histogram", font=style.FONT_HEADER,
                     bg=style.BG_MAIN, fg=style.FG_TEXT).pack()
            hist_img = ImageTk.PhotoImage(plot_histogram_image(hist, color=color))
            tk.Label(frame, image=hist_img, bg=style.BG_MAIN).pack()
            self.hist_refs.append(hist_img)

            if hist.is_empty():
                summary = "empty"
            else:
                low_count, low = hist.get_low()
                high_count, high = hist.get_high()
                summary = f"low: {low} ({low_count})\nhigh: {high} ({high_count})"
            tk.Label(frame, text=summary, font=style.FONT_TEXT, justify="left",
                     bg=style.BG_MAIN, fg=style.FG_SUBTEXT).pack(anchor="w")


def main():
    import sys
    logging.basicConfig(
        level=getattr(logging, style.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = ImageApp(sys.argv[1] if len(sys.argv) > 1 else None)
    app.mainloop()


if __name__ == "__main__":
    main()
