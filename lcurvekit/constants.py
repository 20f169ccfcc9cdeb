"""Physical, astronomical and numerical constants used by the light-curve code.

Values are in SI units unless a comment says otherwise.
"""

import math

# Mathematical
PI = math.pi
TWOPI = math.tau
EFAC = math.sqrt(8.0 * math.log(2.0))  # FWHM / sigma of a gaussian

# Time (seconds)
MINUTE = 60.0
HOUR = 60.0 * MINUTE
DAY = 24.0 * HOUR
IDAY = int(DAY)
YEAR = 365.25 * DAY  # Julian year
MJD2JD = 2400000.5  # JD - MJD

# Fundamental physics
C = 2.99792458e8  # speed of light, exact
G = 6.673e-11
H = 6.6262e-34  # Planck
K = 1.3806e-23  # Boltzmann
E = 1.602176565e-19  # elementary charge
ME = 9.10956e-31  # electron mass
MP = 1.67e-27  # proton mass
SIGMA = 5.66956e-8  # Stefan-Boltzmann
SIGMAT = 6.65e-29  # Thomson cross-section

# Astronomy
AU = 1.49597870691e11
PC = 3.085678e16
LSUN = 3.826e26
MSUN = 1.989e30
RSUN = 6.9599e8
TSUN = 5700.0
MVSUN = 4.75
GMSUN = 1.32712442099e20
GMSUNA = 39.476927033270655  # AU^3 yr^-2
KGAUSS = 0.01720209895  # AU^(3/2) day^-1
GMGAUSS = KGAUSS**2  # AU^3 day^-2

# Balmer line wavelengths (Angstroms); H-delta shares the H-gamma value
HALPHA = 6562.76
HBETA = 4861.327
HGAMMA = 4340.465
HDELTA = HGAMMA