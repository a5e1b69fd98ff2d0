# display.py
"""
Display collaborator: renders an ARGB framebuffer (as produced by
RGBAImage.export_display_buffer) and draws channel histograms.
"""

import logging
from io import BytesIO
from typing import Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
from PIL import Image

import viewer_style as style
from histogram import Histogram

logger = logging.getLogger(__name__)


def to_pil_image(buffer: Sequence[int], width: int, height: int) -> Image.Image:
    """Build a Pillow RGBA image from ARGB words."""
    if len(buffer) != width * height:
        raise ValueError(f"Buffer holds {len(buffer)} pixels, expected {width * height}")
    # ARGB word stored little-endian is the byte sequence B, G, R, A
    arr = np.asarray(buffer, dtype=np.uint32).astype("<u4")
    return Image.frombuffer("RGBA", (width, height), arr.tobytes(), "raw", "BGRA", 0, 1)


def display(buffer: Sequence[int], width: int, height: int, title: str = style.DISPLAY_TITLE):
    """Show an ARGB buffer in a window until it is closed or ESC is pressed."""
    import tkinter as tk
    from PIL import ImageTk

    root = tk.Tk()
    root.title(title)
    root.configure(bg=style.BG_MAIN)

    tk_img = ImageTk.PhotoImage(to_pil_image(buffer, width, height))
    label = tk.Label(root, image=tk_img, bg=style.BG_MAIN)
    label.image = tk_img
    label.pack(fill="both", expand=True)

    root.bind("<Escape>", lambda e: root.destroy())
    logger.debug(f"Displaying {width}x{height} buffer")
    root.mainloop()


def plot_histogram_image(hist: Union[Histogram, Sequence[int]], color="gray",
                         width=style.HIST_PLOT_WIDTH, height=style.HIST_PLOT_HEIGHT) -> Image.Image:
    counts = list(hist)
    fig, ax = plt.subplots(figsize=(width/100, height/100), dpi=100)
    ax.bar(range(256), counts, color=color, width=1.0)
    ax.set_xlim(0, 255)
    ax.set_ylim(0, max(counts)*1.1 if any(counts) else 1)
    ax.axis('off')
    buf = BytesIO()
    fig.savefig(buf, format='png', bbox_inches='tight', pad_inches=0)
    plt.close(fig)
    buf.seek(0)
    img = Image.open(buf)
    img.load()
    return img
