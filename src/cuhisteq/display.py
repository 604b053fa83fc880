# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Interactive display of the input and equalized images."""

import logging

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)

_NON_INTERACTIVE_BACKENDS = (
    "agg", "cairo", "pdf", "pgf", "ps", "svg", "template",
)


def is_interactive_backend():
    backend = plt.get_backend().lower()
    return backend not in _NON_INTERACTIVE_BACKENDS and "inline" not in backend


def _open_window(title, image, on_key):
    fig = plt.figure(title)
    ax = fig.add_subplot()
    if image.ndim == 2:
        ax.imshow(image, cmap="gray", vmin=0, vmax=np.iinfo(image.dtype).max)
    else:
        ax.imshow(image)
    ax.set_title(title)
    ax.set_axis_off()
    fig.canvas.mpl_connect("key_press_event", on_key)
    return fig


def show_images(image_input, image_output, poll_interval=0.05):
    """
    Show the input and output images in two windows.

    Returns once either window is closed or Escape is pressed in either of
    them. Nothing is shown with a non-interactive matplotlib backend.

    Parameters
    ----------
    image_input, image_output : numpy.ndarray
        ``uint8`` or ``uint16`` sample arrays.
    poll_interval : float, optional
        Seconds between checks of the window state.
    """
    if not is_interactive_backend():
        logger.warning(
            "matplotlib backend '%s' is not interactive; not displaying "
            "images", plt.get_backend(),
        )
        return

    escape = []

    def on_key(event):
        if event.key == "escape":
            escape.append(True)

    figures = [
        _open_window("input", image_input, on_key),
        _open_window("output", image_output, on_key),
    ]
    plt.show(block=False)
    try:
        while not escape and all(
            plt.fignum_exists(fig.number) for fig in figures
        ):
            plt.pause(poll_interval)
    finally:
        for fig in figures:
            plt.close(fig)
