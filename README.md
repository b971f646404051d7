# gabornoise

Procedural Gabor noise is a sparse convolution of Gabor kernels, each placed,
weighted and oriented at random. This package computes the noise in the plane
and on surfaces. It evaluates the variance of the noise and its analytic power
spectrum, and it writes the noise and the spectrum as PPM images. It also
provides a few tools for triangle meshes: primitives, per-vertex normals, ray
intersections and an OBJ reader.

It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
gabornoise-images
```

This command renders isotropic noise and its power spectrum and writes
`noise.ppm` and `spectrum.ppm`. The noise uses K = 1, a = 0.05, F0 = 0.125,
orientations over [0, 2π] and 64 impulses per kernel. The images are binary
P6 files.

| Option | Default | Meaning |
| --- | --- | --- |
| `--output DIR` | `../output` | directory the two images are written to. It must already exist. |
| `--resolution N` | `256` | side of the square images in pixels |
| `--seed N` | current time | random offset of the noise |

The command prints `noise saved` and then `spectrum saved`.

## Using the library

### Noise in the plane

`gabornoise.gabor.GaborNoise` takes these arguments, in order:

- the kernel magnitude `k`
- the Gaussian width `a`, which must be nonzero
- the range of frequency magnitudes, `f0_min` and `f0_max`
- the range of orientations, `w0_min` and `w0_max`
- the mean number of impulses per kernel
- a random offset, which acts as the seed
- whether the noise tiles periodically
- optionally the `period`, 256 by default

```python
import math
from gabornoise.gabor import GaborNoise

# isotropic noise: one frequency, every orientation
noise = GaborNoise(1.0, 0.05, 0.125, 0.125, 0.0, 2 * math.pi, 64.0, 12345, False)

value = noise.intensity(10.0, -3.5)
sigma = math.sqrt(noise.variance())
power = noise.power_spectrum(0.1, 0.0)
```

For anisotropic noise, give one value to both ends of the frequency range and
one value to both ends of the orientation range, for example `math.pi / 4`.
When a range is wider than 0.01, `variance` and `power_spectrum` integrate
over it numerically.

The module also exposes its building blocks:

- `gabor` evaluates a single kernel.
- `gabor_fourier_transform` evaluates the Fourier transform of a kernel.
- `morton` interleaves the bits of the two cell coordinates. The result seeds each non-periodic cell.

`GaborNoise.cell_noise` returns the contribution of one cell.

### Noise on surfaces

`gabornoise.surface_noise.SurfaceNoise(k, a, f0, impulses_per_kernel,
random_offset, is_periodic, period=256)` is isotropic noise with a single
frequency magnitude. `intensity(x, y, z, n)` evaluates it at a 3D point, where
`n` is the surface normal as a `Vec3` or a 3-sequence. Each impulse is projected
onto the tangent plane before its kernel is applied. `projection_3d` does the
projection onto the plane, and `projection_2d` gives coordinates within the
plane. `variance` returns the analytic variance.

### Images

```python
from gabornoise.gabor import GaborNoise
from gabornoise.images import noise_image, spectrum_image, save_ppm

noise = GaborNoise(1.0, 0.05, 0.125, 0.225, 0.0, 0.8, 64.0, 7, False)
save_ppm(noise_image(noise, 256), 256, "noise.ppm")
save_ppm(spectrum_image(noise, 256), 256, "spectrum.ppm")
```

- `noise_image` samples the noise on a grid centred on the origin and maps it to grey. Pixels are clamped to black and white at ±3 standard deviations.
- `spectrum_image` covers frequencies in [-1.1, 1.1].
- Both return a flat list of `Vec3` pixels.
- `save_ppm` raises `ValueError` when the pixel count does not match the resolution.

`find_color(t, color_scale)` interpolates linearly along a sequence of colours
for `t` in [0, 1]. By default it runs from red to blue.

### Random numbers

`gabornoise.prng.PseudoRandomNumberGenerator` is the 32-bit multiplicative
generator that places the impulses. It provides `next`, `uniform_0_1`,
`uniform` and `poisson`. The same seed always produces the same noise.

### Vectors

`gabornoise.vec3` provides an immutable `Vec3` with arithmetic operators and
these methods:

- `length`
- `squared_length`
- `normalized`
- `two_orthogonals`
- `project_on`

It also provides these functions:

- `dot`
- `cross`
- `length`
- `dist`
- `normalize`
- `mix`
- `cartesian_to_polar`
- `polar_to_cartesian`

### Meshes

- `gabornoise.mesh.Mesh` holds positions, normals, colours, uv coordinates and triangles. It has `fill_empty_field`, `extend`, `flip_connectivity` and `compute_normal`.
- `normal_per_vertex`, `mesh_check` and `connectivity_one_ring` work on the raw lists. `mesh_check` reports problems through the `logging` module, and it returns `False` when a triangle indexes past the positions.
- `gabornoise.primitives` builds `triangle`, `quadrangle`, `sphere`, `grid`, `cube`, `cubic_grid` and `tetrahedron` meshes.
- `gabornoise.intersection` intersects rays with spheres and planes and returns an `Intersection`. The functions are `intersection_ray_sphere`, `intersection_ray_plane` and `intersection_ray_spheres_closest`. The last one returns a pair: the hit and the index of the sphere that was hit.
- `gabornoise.obj` reads Wavefront OBJ files.
  - `load_obj` returns a mesh with every field filled.
  - `load_obj_with_correspondence` also returns, for each vertex in the file, the mesh vertices made from it.
  - The lower-level readers are `read_positions`, `read_normals`, `read_texture_uv`, `read_faces`, `read_connectivity`, `extract_face_index` and `triangulate_faces`. `ObjType` selects the face format.

## What it does not do

- There is no interactive viewer. The noise can be written to PPM files or used through the library, but nothing shows it in a window or on a rendered surface.
- Nothing applies surface noise to a loaded mesh for you. To colour or displace a mesh, evaluate `SurfaceNoise` or `GaborNoise` per vertex yourself.
- The only mesh primitives are the ones listed above.
- Meshes can be read from OBJ files but not written.