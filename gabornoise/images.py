"""Greyscale renderings of Gabor noise and its power spectrum, saved as binary PPM."""

from __future__ import annotations

import argparse
import math
import time
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .gabor import GaborNoise
from .vec3 import Vec3

PathLike = Union[str, Path]

WHITE = Vec3(255.0, 255.0, 255.0)
BLACK = Vec3(0.0, 0.0, 0.0)
DEFAULT_COLOR_SCALE = (Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))


def find_color(t: float, color_scale: Sequence[Vec3] = DEFAULT_COLOR_SCALE) -> Vec3:
    """Piecewise-linear interpolation of ``color_scale`` for ``t`` in [0, 1]."""
    n = len(color_scale)
    if n == 0:
        raise ValueError("color scale is empty")
    i = math.floor(t * (n - 1))
    if i == n - 1:
        return color_scale[n - 1]
    start = i / (n - 1)
    stop = (i + 1) / (n - 1)
    local = (t - start) / (stop - start)
    return color_scale[i] * (1.0 - local) + color_scale[i + 1] * local


def _grey(value: float) -> Vec3:
    """Map a value in [0, 1] to a grey pixel, clamping outside values."""
    if value <= 0.0:
        return BLACK
    if value >= 1.0:
        return WHITE
    return WHITE * value


def _centered(index: int, resolution: int) -> float:
    return index + 0.5 - resolution / 2.0


def noise_image(noise: GaborNoise, resolution: int) -> List[Vec3]:
    """Noise sampled on a centred grid, pixel (i, j) stored at ``i * resolution + j``."""
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    scale = 6.0 * math.sqrt(noise.variance())
    return [
        _grey(
            0.5
            + noise.intensity(_centered(i, resolution), _centered(resolution - 1 - j, resolution))
            / scale
        )
        for i in range(resolution)
        for j in range(resolution)
    ]


def spectrum_image(noise: GaborNoise, resolution: int) -> List[Vec3]:
    """Power spectrum over frequencies in [-1.1, 1.1], laid out like :func:`noise_image`."""
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    step = 1.1 * 2.0 / resolution
    return [
        _grey(
            noise.power_spectrum(
                _centered(i, resolution) * step,
                _centered(resolution - 1 - j, resolution) * step,
            )
        )
        for i in range(resolution)
        for j in range(resolution)
    ]


def save_ppm(image: Sequence[Vec3], resolution: int, path: PathLike) -> None:
    """Write a square image as a binary (P6) PPM file, truncating components to bytes."""
    if len(image) != resolution * resolution:
        raise ValueError(
            f"image has {len(image)} pixels, expected {resolution * resolution}"
        )
    header = f"P6\n{resolution} {resolution}\n255\n".encode("ascii")
    body = bytes(int(component) & 0xFF for color in image for component in color)
    with open(path, "wb") as stream:
        stream.write(header)
        stream.write(body)


def _default_noise(seed: int) -> GaborNoise:
    return GaborNoise(
        1.0, 0.05, 0.125, 0.125, 0.0, 2.0 * math.pi, 64.0, seed, False
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the default noise and its spectrum to ``noise.ppm`` and ``spectrum.ppm``."""
    parser = argparse.ArgumentParser(description="Render Gabor noise and its power spectrum.")
    parser.add_argument("--output", default="../output", help="directory for the images")
    parser.add_argument("--resolution", type=int, default=256, help="image side in pixels")
    parser.add_argument("--seed", type=int, default=None, help="random offset of the noise")
    args = parser.parse_args(argv)

    seed = int(time.time()) if args.seed is None else args.seed
    noise = _default_noise(seed)
    output = Path(args.output)

    save_ppm(noise_image(noise, args.resolution), args.resolution, output / "noise.ppm")
    print("noise saved")

    save_ppm(spectrum_image(noise, args.resolution), args.resolution, output / "spectrum.ppm")
    print("spectrum saved")
    return 0