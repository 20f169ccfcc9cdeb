# lcurvekit

Pure-Python building blocks for modelling the light curves of close binary
stars: vectors and surface elements with their eclipse phases, limb-darkening
laws, eclipses by a flared accretion disc, volume-averaged stellar radii,
light-curve data files and general-purpose minimisers.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `lcurvekit.constants` | Physical and astronomical constants (SI units unless noted) |
| `lcurvekit.elements` | `Vec3`, `Point`, `Ginterp`, `LDC`, `LDCType`, `Pparam`, `parse_pparam`, `parse_pparam_strict`, `LcurveError` |
| `lcurvekit.data` | `Datum`, `parse_datum`, `format_datum`, `read_data`, `write_data` |
| `lcurvekit.radius` | `comp_radius1`, `comp_radius2` |
| `lcurvekit.disc_eclipse` | `disc_eclipse`, `circle_eclipse`, `cut_phase`, `Circle`, `RocheError` |
| `lcurvekit.minimise` | `amoeba`, `dbrent`, `MinimiseError` |
| `lcurvekit.simplex` | `nelder_mead` |
| `lcurvekit.byteswap` | `byte_swap` |

## Examples

### Surface elements and limb darkening

```python
from lcurvekit.elements import LDC, LDCType, Point, Vec3

ldc = LDC(0.5, 0.0, 0.0, 0.0, 0.0, LDCType.POLY)
ldc.imu(0.5)          # intensity relative to disc centre: 0.75
ldc.see(0.1)          # True: mu exceeds the critical value

pt = Point(posn=Vec3(0.0, 0.0, 0.01), dirn=Vec3(0.0, 0.0, 1.0),
           area=1e-4, gravity=1.0, eclipse=[(0.95, 1.05)])
pt.visible(0.0)       # False: eclipsed around phase 0
pt.visible(0.5)       # True
```

`LDCType.CLARET` selects the four-coefficient law in powers of sqrt(mu).
`Ginterp` gives the scale factors (`scale1`, `scale2`) and grid choice
(`grid_type`, returning 1, 2 or 3) used when switching between fine and
coarse surface grids with orbital phase.

### Volume-averaged radii

`comp_radius1` and `comp_radius2` take a sequence of `Point` objects covering
a star (centred on the origin and on (1, 0, 0) respectively) and return the
volume-averaged radius in units of the binary separation. An empty grid
raises `LcurveError`.

### Eclipses by a flared disc

```python
from lcurvekit.disc_eclipse import disc_eclipse
from lcurvekit.elements import Vec3

phases = disc_eclipse(85.0, 0.01, 0.3, 1.5, 0.05, Vec3(0.9, 0.0, 0.0))
# list of (ingress, egress) phase pairs; empty if never eclipsed
```

Arguments are the inclination in degrees, inner and outer disc radii, the
flaring exponent (at least 1, otherwise `RocheError`), the disc height at unit
radius and the point's position. A point inside the disc gets `[(0.0, 1.1)]`,
i.e. eclipsed at all phases.

### Light-curve data files

Each line holds time, exposure, flux, flux error, weight and the number of
sub-divisions. Lines that are empty or start with `#`, a space or a tab are
skipped. A negative flux error sets both the error and the weight to zero.

```python
from lcurvekit.data import read_data, write_data

data = read_data("observations.dat")   # list of Datum
write_data(data, "copy.dat")
```

Unreadable files or malformed lines raise `LcurveError`.

### Physical parameters

```python
from lcurvekit.elements import parse_pparam, parse_pparam_strict

q = parse_pparam("0.12 0.01 0.001 1")        # 'defined' defaults to True
float(q)                                      # 0.12
parse_pparam_strict("0.12 0.01 0.001 1 1")    # exactly five fields required
```

### Minimisers

Bounded Nelder–Mead; each trial point is clipped to its `(low, high)` limits
and progress is logged through the `lcurvekit.simplex` logger every ten
iterations:

```python
from lcurvekit.simplex import nelder_mead

best = nelder_mead(
    lambda p: (p[0] - 1.0) ** 2 + (p[1] + 2.0) ** 2,
    [0.0, 0.0], [0.5, 0.5], [(-5.0, 5.0), (-5.0, 5.0)],
    200, 1e-8,
)
```

Downhill simplex from N+1 corners with their function values; returns the
final corners (best first once converged) and the number of calls. Going past
`nmax` calls stops the search with a `RuntimeWarning`:

```python
from lcurvekit.minimise import amoeba

f = lambda p: (p[0] - 1.0) ** 2 + (p[1] - 2.0) ** 2
corners = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]]
result, ncalls = amoeba([(c, f(c)) for c in corners], 1e-10, 5000, f)
```

Line minimisation with derivatives over a bracket `ax < bx < cx`, returning
`(xmin, fmin)`; it raises `MinimiseError` after 100 iterations:

```python
from lcurvekit.minimise import dbrent

xmin, fmin = dbrent(0.0, 1.0, 3.0, lambda x: (x - 2.0) ** 2,
                    lambda x: 2.0 * (x - 2.0), 1e-8)
```

### Byte order

```python
from lcurvekit.byteswap import byte_swap

byte_swap(1, "I")     # 16777216
```

## What the package does not do

lcurvekit supplies components only. It does not build stellar, disc or
bright-spot surface grids, compute Roche-lobe geometry, set element
brightnesses or compute a complete model light curve and its chi-squared.
It has no command-line program, no configuration-file reader, no MCMC fitting
and no plotting.