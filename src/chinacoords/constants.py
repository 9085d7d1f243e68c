"""Ellipsoid and scaling constants of the GCJ02 / BD09 offset algorithms.

These are the published values and must be reproduced exactly: any change
moves the output by metres.
"""

# Krasovsky 1940 semi-major axis, metres
A = 6378245.0
# Eccentricity squared
EE = 0.00669342162296594323
# PI as written in the published WGS84 <-> GCJ02 formulas (not math.pi)
PI = 3.1415926535897932384626
# Angular scaling used only by the GCJ02 <-> BD09 polar transform
X_PI = 3.14159265358979324 * 3000.0 / 180.0
