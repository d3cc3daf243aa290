"""
Parsing and formatting of numbers with SI unit prefixes.

Values typed into the property panel ("10k", "4.7u", "2MEG") end up as
plain floats on the element model.
"""

import re

# Dictionary of SI prefixes and their multipliers
# Includes common variations like 'u' for 'µ' and 'MEG' for 'M'
SI_PREFIX_MULTIPLIERS = {
    'f': 1e-15,  # Femto
    'p': 1e-12,  # Pico
    'n': 1e-9,   # Nano
    'u': 1e-6,   # Micro
    'µ': 1e-6,   # Micro
    'm': 1e-3,   # Milli
    'k': 1e3,    # Kilo
    'M': 1e6,    # Mega
    'MEG': 1e6,  # Mega (SPICE variant)
    'G': 1e9,    # Giga
    'T': 1e12,   # Tera
}

# (multiplier, prefix) pairs, largest first
FORMATTING_PREFIXES = sorted(
    [(1e12, 'T'), (1e9, 'G'), (1e6, 'M'), (1e3, 'k'),
     (1, ''), (1e-3, 'm'), (1e-6, 'µ'), (1e-9, 'n'), (1e-12, 'p'), (1e-15, 'f')],
    key=lambda x: x[0], reverse=True
)

_NUMBER_RE = re.compile(r'^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)([a-zA-Zµ]*)$')


def parse_value(s) -> float:
    """
    Parses a string with an optional SI prefix into a float.
    Examples: "10k" -> 10000.0, "25m" -> 0.025, "10u" -> 1e-5, "2MEG" -> 2e6

    Anything after the prefix is treated as a unit and ignored ("10kOhm").

    Raises:
        ValueError: If the string does not start with a number.
    """
    if isinstance(s, (int, float)):
        return float(s)
    if not isinstance(s, str):
        raise ValueError(f"Invalid number format: {s!r}")

    s = s.strip()
    match = _NUMBER_RE.match(s)
    if not match:
        raise ValueError(f"Invalid number format: {s}")

    num_str, unit_str = match.groups()
    number = float(num_str)

    if not unit_str:
        return number

    # SPICE 'MEG' wins over milli
    if unit_str.upper().startswith('MEG'):
        return number * SI_PREFIX_MULTIPLIERS['MEG']

    multiplier = SI_PREFIX_MULTIPLIERS.get(unit_str[0])
    if multiplier is None:
        return number
    return number * multiplier


def format_value(value: float, unit: str = "") -> str:
    """
    Formats a float into a string with the most appropriate SI prefix.
    Examples: 0.015 -> "15.00 m", 15000 -> "15 k"
    """
    if value == 0:
        return f"0 {unit}".rstrip()

    abs_val = abs(value)

    for mult, prefix in FORMATTING_PREFIXES:
        if abs_val >= mult:
            scaled_val = value / mult
            # Avoid trailing ".00" for whole numbers
            if scaled_val == int(scaled_val):
                return f"{int(scaled_val)} {prefix}{unit}".rstrip()
            return f"{scaled_val:.2f} {prefix}{unit}".rstrip()

    # Smaller than the smallest prefix
    return f"{value:.2e} {unit}".rstrip()
