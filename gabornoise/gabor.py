"""Sparse-convolution Gabor noise in the plane."""

from __future__ import annotations

import math

from .prng import UINT_MAX, PseudoRandomNumberGenerator

_EPS = 1e-2


def morton(x: int, y: int) -> int:
    """Interleave the bits of two unsigned 32-bit integers (x on even bits)."""
    x &= UINT_MAX
    y &= UINT_MAX
    z = 0
    for i in range(32):
        bit = 1 << i
        z |= ((x & bit) << i) | ((y & bit) << (i + 1))
    return z & UINT_MAX


def gabor(k: float, a: float, f0: float, w0: float, x: float, y: float) -> float:
    """Gabor kernel: Gaussian envelope times an oriented harmonic."""
    gaussian = k * math.exp(-math.pi * a * a * (x * x + y * y))
    harmonic = math.cos(2.0 * math.pi * f0 * (x * math.cos(w0) + y * math.sin(w0)))
    return gaussian * harmonic


def gabor_fourier_transform(
    k: float, a: float, f0: float, w0: float, fx: float, fy: float
) -> float:
    """Fourier transform of the Gabor kernel at frequency (fx, fy)."""
    cx = f0 * math.cos(w0)
    cy = f0 * math.sin(w0)
    scale = math.pi / (a * a)
    return (
        math.exp(-((fx - cx) ** 2 + (fy - cy) ** 2) * scale)
        + math.exp(-((fx + cx) ** 2 + (fy + cy) ** 2) * scale)
    ) * k / (2.0 * a * a)


def _cell_seed(i: int, j: int, random_offset: int, is_periodic: bool, period: int) -> int:
    if is_periodic:
        seed = ((j & UINT_MAX) % period) * period + ((i & UINT_MAX) % period) + random_offset
    else:
        seed = morton(i, j) + random_offset
    seed &= UINT_MAX
    return seed or 1


class GaborNoise:
    """2D Gabor noise with frequencies in [f0_min, f0_max] and orientations in [w0_min, w0_max]."""

    def __init__(
        self,
        k: float,
        a: float,
        f0_min: float,
        f0_max: float,
        w0_min: float,
        w0_max: float,
        number_of_impulses_per_kernel: float,
        random_offset: int,
        is_periodic: bool,
        period: int = 256,
    ) -> None:
        if a == 0:
            raise ValueError("Gaussian width a must be nonzero")
        if period <= 0:
            raise ValueError("period must be positive")
        self.k = k
        self.a = a
        self.f0_min = f0_min
        self.f0_max = f0_max
        self.w0_min = w0_min
        self.w0_max = w0_max
        self.random_offset = int(random_offset) & UINT_MAX
        self.is_periodic = is_periodic
        self.period = int(period)
        self.kernel_radius = 1.0 / a
        self.impulse_density = number_of_impulses_per_kernel / (
            math.pi * self.kernel_radius**2
        )

    def intensity(self, x: float, y: float) -> float:
        """Noise value at (x, y)."""
        x /= self.kernel_radius
        y /= self.kernel_radius
        cell_x = math.floor(x)
        cell_y = math.floor(y)
        frac_x = x - cell_x
        frac_y = y - cell_y
        return sum(
            self.cell_noise(cell_x + i, cell_y + j, frac_x - i, frac_y - j)
            for i in (-1, 0, 1)
            for j in (-1, 0, 1)
        )

    def cell_noise(self, i: int, j: int, x: float, y: float) -> float:
        """Contribution of the impulses of cell (i, j) at local position (x, y)."""
        seed = _cell_seed(i, j, self.random_offset, self.is_periodic, self.period)
        prng = PseudoRandomNumberGenerator(seed)

        impulses_per_cell = self.impulse_density * self.kernel_radius**2
        count = prng.poisson(impulses_per_cell)

        noise = 0.0
        for _ in range(count):
            xi = prng.uniform_0_1()
            yi = prng.uniform_0_1()
            wi = prng.uniform(-1.0, 1.0)
            f0i = prng.uniform(self.f0_min, self.f0_max)
            w0i = prng.uniform(self.w0_min, self.w0_max)
            dx = x - xi
            dy = y - yi
            if dx * dx + dy * dy < 1.0:
                noise += wi * gabor(
                    self.k,
                    self.a,
                    f0i,
                    w0i,
                    dx * self.kernel_radius,
                    dy * self.kernel_radius,
                )
        return noise

    def variance(self) -> float:
        """Analytic variance of the noise."""
        base = self.impulse_density * self.k**2 / (12.0 * self.a**2)
        f_range = self.f0_max - self.f0_min
        if f_range > _EPS:
            steps = 100
            df = f_range / (steps - 1)
            integral = sum(
                df * (1.0 + math.exp(-2.0 * math.pi * (n * df) ** 2 / self.a**2))
                for n in range(steps)
            )
            return integral * base / f_range
        return base * (1.0 + math.exp(-2.0 * math.pi * self.f0_min**2 / self.a**2))

    def _spectrum_term(self, f0: float, w0: float, fx: float, fy: float) -> float:
        return gabor_fourier_transform(self.k, self.a, f0, w0, fx, fy) ** 2

    def power_spectrum(self, fx: float, fy: float) -> float:
        """Power spectrum of the noise at frequency (fx, fy)."""
        f_range = self.f0_max - self.f0_min
        w_range = self.w0_max - self.w0_min
        density = self.impulse_density

        if f_range <= _EPS and w_range <= _EPS:
            return self._spectrum_term(self.f0_min, self.w0_min, fx, fy) * density / 3.0

        if f_range <= _EPS:
            steps = 100
            dw = w_range / (steps - 1)
            integral = sum(
                dw * self._spectrum_term(self.f0_min, self.w0_min + n * dw, fx, fy)
                for n in range(steps)
            )
            return integral * density / (3.0 * w_range)

        if w_range <= _EPS:
            steps = 100
            df = f_range / (steps - 1)
            integral = sum(
                df * self._spectrum_term(self.f0_min + n * df, self.w0_min, fx, fy)
                for n in range(steps)
            )
            return integral * density / (3.0 * f_range)

        steps = 30
        df = f_range / (steps - 1)
        dw = w_range / (steps - 1)
        integral = sum(
            dw * df * self._spectrum_term(self.f0_min + nf * df, self.w0_min + nw * dw, fx, fy)
            for nw in range(steps)
            for nf in range(steps)
        )
        return integral * density / (3.0 * f_range * w_range)