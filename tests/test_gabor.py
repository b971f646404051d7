import math

import pytest

from gabornoise.gabor import GaborNoise, gabor, gabor_fourier_transform, morton


def make_noise(**overrides):
    params = dict(
        k=1.0,
        a=0.0625,
        f0_min=0.125,
        f0_max=0.125,
        w0_min=0.0,
        w0_max=2 * math.pi,
        number_of_impulses_per_kernel=8.0,
        random_offset=12345,
        is_periodic=False,
    )
    params.update(overrides)
    return GaborNoise(**params)


POINTS = [(3.3, -5.2), (0.7, 1.9), (-12.5, 8.25), (20.0, 31.0), (-4.4, -17.6)]


def test_morton_small_values():
    assert morton(1, 0) == 1
    assert morton(0, 1) == 2
    assert morton(1, 1) == 3


@pytest.mark.parametrize("v", [0, 1, 5, 77, 1000, 32767])
def test_morton_y_is_shifted_x(v):
    assert morton(0, v) == morton(v, 0) << 1
    assert morton(v, v) == morton(v, 0) | morton(0, v)


def test_morton_negative_inputs_stay_32_bit():
    assert 0 <= morton(-1, -7) < 2**32
    assert morton(-1, 0) == morton(2**32 - 1, 0)


def test_gabor_at_origin_is_magnitude():
    assert gabor(2.5, 0.05, 0.125, 0.3, 0.0, 0.0) == pytest.approx(2.5)


def test_gabor_is_even():
    assert gabor(1.0, 0.05, 0.2, 0.7, 3.0, -4.0) == pytest.approx(
        gabor(1.0, 0.05, 0.2, 0.7, -3.0, 4.0)
    )


def test_gabor_bounded_by_envelope():
    for x in (0.5, 3.0, 10.0):
        value = gabor(1.0, 0.05, 0.2, 0.7, x, x)
        assert abs(value) <= math.exp(-math.pi * 0.05**2 * 2 * x * x) + 1e-12


def test_fourier_transform_symmetric():
    assert gabor_fourier_transform(1.0, 0.05, 0.125, 0.4, 0.1, 0.03) == pytest.approx(
        gabor_fourier_transform(1.0, 0.05, 0.125, 0.4, -0.1, -0.03)
    )


def test_fourier_transform_zero_frequency_peak_at_origin():
    origin = gabor_fourier_transform(1.0, 0.05, 0.0, 0.0, 0.0, 0.0)
    assert origin > gabor_fourier_transform(1.0, 0.05, 0.0, 0.0, 0.02, 0.0)


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        make_noise(a=0.0)


def test_intensity_deterministic():
    first = [make_noise().intensity(x, y) for x, y in POINTS]
    second = [make_noise().intensity(x, y) for x, y in POINTS]
    assert first == second
    assert any(value != 0.0 for value in first)


def test_intensity_linear_in_magnitude():
    one = make_noise(k=1.0).intensity(7.1, 2.4)
    two = make_noise(k=2.0).intensity(7.1, 2.4)
    assert two == pytest.approx(2.0 * one, abs=1e-12)


def test_zero_magnitude_gives_zero():
    assert make_noise(k=0.0).intensity(7.1, 2.4) == 0.0


def test_no_impulses_gives_zero():
    assert make_noise(number_of_impulses_per_kernel=0.0).intensity(1.0, 2.0) == 0.0


def test_cell_noise_far_point_is_zero():
    assert make_noise().cell_noise(3, 4, 10.0, 10.0) == 0.0


def test_periodic_cells_repeat():
    noise = make_noise(is_periodic=True)
    assert noise.cell_noise(2, -3, 0.4, 0.6) == noise.cell_noise(2 + 256, -3 - 256, 0.4, 0.6)


def test_periodic_intensity_repeats():
    noise = make_noise(is_periodic=True)
    shift = 256 * noise.kernel_radius
    assert noise.intensity(3.3, -5.2) == pytest.approx(
        noise.intensity(3.3 + shift, -5.2), abs=1e-9
    )


def test_variance_positive_and_quadratic_in_magnitude():
    v1 = make_noise(k=1.0).variance()
    v2 = make_noise(k=2.0).variance()
    assert v1 > 0
    assert v2 == pytest.approx(4.0 * v1)


def test_variance_frequency_range_quadratic_in_magnitude():
    v1 = make_noise(k=1.0, f0_min=0.1, f0_max=0.3).variance()
    v2 = make_noise(k=3.0, f0_min=0.1, f0_max=0.3).variance()
    assert v1 > 0
    assert v2 == pytest.approx(9.0 * v1)


def test_anisotropic_spectrum_symmetric_and_nonnegative():
    noise = make_noise(w0_min=math.pi / 4, w0_max=math.pi / 4)
    value = noise.power_spectrum(0.08, 0.09)
    assert value >= 0
    assert value == pytest.approx(noise.power_spectrum(-0.08, -0.09))


def test_isotropic_spectrum_nearly_rotation_invariant():
    noise = make_noise(a=0.05)
    f0 = 0.125
    first = noise.power_spectrum(f0 * math.cos(1.0), f0 * math.sin(1.0))
    second = noise.power_spectrum(f0 * math.cos(2.0), f0 * math.sin(2.0))
    assert first > 0
    assert first == pytest.approx(second, rel=0.02)


def test_frequency_band_spectrum_nonnegative():
    noise = make_noise(f0_min=0.1, f0_max=0.3, w0_min=0.5, w0_max=0.5)
    assert noise.power_spectrum(0.1, 0.1) >= 0
    assert noise.power_spectrum(0.1, 0.1) == pytest.approx(noise.power_spectrum(-0.1, -0.1))


def test_general_spectrum_nonnegative():
    noise = make_noise(f0_min=0.1, f0_max=0.3, w0_min=0.0, w0_max=1.0)
    assert noise.power_spectrum(0.15, 0.05) >= 0