"""Mathematical constants shared by the generators."""

import math

# Golden ratio: root of x^2 = x + 1
PHI = 1.618033988749895

# Plastic constant: real root of x^3 = x + 1
PHI2 = 1.3247179572447460259609088544780973

SQRT2 = math.sqrt(2.0)

# Sobol direction numbers are 30-bit integers
SOBOL_BITS = 30
