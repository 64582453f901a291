"""Protocol constants and policy defaults."""

from datetime import timedelta

# Key chain policy
TROPICAL_YEAR = timedelta(days=365.24219)
TWO_YEARS = 2 * TROPICAL_YEAR

DEFAULT_ROTATION_LEAD_TIME = TROPICAL_YEAR
DEFAULT_RETENTION_WINDOW = TWO_YEARS

# Environment overrides for the key chain policy, in days
ENV_ROTATION_LEAD_DAYS = "HOSTKEYS_ROTATION_LEAD_DAYS"
ENV_RETENTION_DAYS = "HOSTKEYS_RETENTION_DAYS"

# Symmetric ciphers
INITIALIZATION_VECTOR_LENGTH = 16

# Random exponents are drawn a few bits wider than the modulus
RANDOM_EXPONENT_EXTRA_BITS = 4
