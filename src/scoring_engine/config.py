# Scoring branches, first match wins.
# (coverage_percent, signal_strength_dbm)
NO_TRANSMITTER_RESULT = (0.0, -120.0)
SINGLE_TRANSMITTER_RESULT = (45.0, -95.0)  # Shadowed by the bleachers
MULTI_TRANSMITTER_RESULT = (75.0, -85.0)  # Still shadowing behind metal
MULTI_TRANSMITTER_WITH_RIS_RESULT = (98.0, -65.0)

MULTI_TRANSMITTER_THRESHOLD = 2

# Derived metrics
SNR_OFFSET_DB = 105.0  # snr = signal + offset
LATENCY_WITH_TRANSMITTER_MS = 8.0
LATENCY_WITHOUT_TRANSMITTER_MS = 100.0
POWER_PER_TRANSMITTER_W = 20.0

# Pass/fail gate (coverage only)
SUCCESS_COVERAGE_THRESHOLD = 95.0

# Objective comparison operators accepted at level-definition time
OBJECTIVE_COMPARISONS = (">=", "<=")
DEFAULT_OBJECTIVE_METRIC = "latency"
DEFAULT_OBJECTIVE_COMPARISON = "<="

# (metric, comparison) for objectives that do not declare their own
OBJECTIVE_DEFAULTS = {
    "obj_coverage": ("coverage_percent", ">="),
    "obj_latency": ("latency", "<="),
}
