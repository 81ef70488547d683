# FILE: spheretrace/preview.py
"""
Matplotlib window for inspecting a finished render
"""
import matplotlib.pyplot as plt
import numpy as np


def show_image(image: np.ndarray, title: str = "spheretrace", block: bool = True):
    """Display an RGB uint8 image; returns the figure"""
    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_axes([0, 0, 1, 1])
    ax.imshow(image, interpolation='nearest')
    ax.set_axis_off()
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(title)
    plt.show(block=block)
    return fig
