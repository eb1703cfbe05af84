"""
Batch configuration and job definitions.
========================================

Default driver limits and the queue of polynomial systems to process.

Each job: (job_name, builder, n, coefficient_kind, exponent_kind, order).
`n` is the cyclic size or the number of random polynomials; it is ignored
by the symmetric builder.
"""

from groebner_basis.basis import GroebnerConfig


# --- Default driver parameters ---

DEFAULT_CONFIG = GroebnerConfig(
    max_passes=50,
    max_basis_size=500,
    verbose=True,
)

DEFAULT_MODULUS = 13


# --- Job queue ---
# Ordered by increasing cost within each family.

JOB_QUEUE = [
    # --- Symmetric: x^3+y^3+z^3, xy+yz+xz, x+y+z ---
    ("Symmetric-GF13-vec-lex",       "symmetric", 3, "modp",   "vec",    "lex"),
    ("Symmetric-GF13-packed-lex",    "symmetric", 3, "modp",   "packed", "lex"),
    ("Symmetric-double-vec-lex",     "symmetric", 3, "double", "vec",    "lex"),
    ("Symmetric-double-packed-lex",  "symmetric", 3, "double", "packed", "lex"),
    ("Symmetric-single-vec-grlex",   "symmetric", 3, "single", "vec",    "grlex"),
    ("Symmetric-GF13-vec-revlex",    "symmetric", 3, "modp",   "vec",    "revlex"),

    # --- Cyclic n-roots ---
    ("Cyclic(3)-GF13-vec-lex",       "cyclic",    3, "modp",   "vec",    "lex"),
    ("Cyclic(3)-GF13-packed-grlex",  "cyclic",    3, "modp",   "packed", "grlex"),
    ("Cyclic(3)-GF13-vec-revlex",    "cyclic",    3, "modp",   "vec",    "revlex"),

    # --- LCG random systems (3 polynomials, 3 terms, 3 variables) ---
    ("Random(3)-GF13-vec-lex",       "random",    3, "modp",   "vec",    "lex"),
    ("Random(3)-GF13-packed-lex",    "random",    3, "modp",   "packed", "lex"),
    ("Random(3)-double-vec-grlex",   "random",    3, "double", "vec",    "grlex"),
]
