"""
Domain constants for scan geometry and scan-rate estimation.

Angles are full scan angles in degrees. Rates are in KPPS (thousand points
per second).
"""

# Domain ceiling for every angle-bearing computation (degrees)
MAX_ANGLE = 90.0

# Below the smallest specified angle the rate grows with smallest/target,
# but never by more than this factor
BELOW_RANGE_RATIO_CAP = 1.5

# Floor for any computed (non-sentinel) estimate
MIN_KPPS = 1

# Sentinel rate paired with the non-computation notes
NO_ESTIMATE_KPPS = 0

# Note templates
NOTE_UNKNOWN = "Unknown"
NOTE_EXCEEDS_MAX_ANGLE = "Exceeds max angle ({max_angle}°)"
NOTE_MAX_KPPS = "Max KPPS ({max_kpps}K)"
NOTE_BELOW_RANGE = "Estimated (< {angle}°)"
NOTE_ABOVE_RANGE = "Estimated (> {angle}°)"
NOTE_INTERPOLATED = "Interpolated ({lower}° - {upper}°)"
