#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mcuhisteq` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``cuhisteq.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``cuhisteq.__main__`` in ``sys.modules``.

  Also see (1) from http://click.pocoo.org/5/setuptools/#setuptools-integration
"""

import logging

import click

from .profiling import RESOLUTIONS


def _list_platforms(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return value
    from .backend import list_platforms_devices

    click.echo(list_platforms_devices())
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-p", "--platform", "platform_id", type=int, default=0,
              show_default=True, help="select platform")
@click.option("-d", "--device", "device_id", type=int, default=0,
              show_default=True, help="select device")
@click.option("-l", "--list", "list_devices", is_flag=True, is_eager=True,
              expose_value=False, callback=_list_platforms,
              help="list all platforms and devices")
@click.option("-f", "--file", "image_filename", type=click.Path(),
              default="test.pgm", show_default=True,
              help="input image file")
@click.option("-b", "--bins", "bin_count", type=click.IntRange(min=1),
              prompt="Enter number of bins - 256 for 8-bit image",
              help="number of histogram bins")
@click.option("-o", "--output", "output_filename", type=click.Path(),
              default=None, help="write the equalized image to this file")
@click.option("--display/--no-display", default=True, show_default=True,
              help="show input and output images")
@click.option("--resolution", type=click.Choice(list(RESOLUTIONS)),
              default="us", show_default=True,
              help="unit of the profiling report")
@click.option("-v", "--verbose", is_flag=True, help="debug logging")
@click.pass_context
def main(ctx, platform_id, device_id, image_filename, bin_count,
         output_filename, display, resolution, verbose):
    """Equalize the histogram of a grayscale image on a compute device."""
    from .backend import get_device
    from .core import equalize_hist
    from .errors import BuildError, EqualizeError
    from .io import image_info, load_image, save_image

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    try:
        image = load_image(image_filename)
        width, height, channels, bit_depth = image_info(image)
        click.echo(f"Image {width}x{height}, {channels} channel(s), "
                   f"{bit_depth} bit")
        device = get_device(platform_id, device_id)
        click.echo(f"Running on {device.platform_name}, {device.name}")
        result = equalize_hist(image, bin_count, device=device)
    except BuildError as e:
        click.echo(f"ERROR: {e}", err=True)
        click.echo(f"Build Log:\t{e.log}", err=True)
        ctx.exit(1)
    except EqualizeError as e:
        click.echo(f"ERROR: {e}", err=True)
        ctx.exit(1)

    click.echo(result.profile.format(resolution))

    if output_filename is not None:
        try:
            save_image(output_filename, result.image)
        except (OSError, ValueError) as e:
            click.echo(f"ERROR: {e}", err=True)
            ctx.exit(1)

    if display:
        from .display import show_images

        show_images(image, result.image)
