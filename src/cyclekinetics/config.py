"""
Configuration for the cycle decay estimator and its viewer
"""

import os

# Series colours, assigned round-robin in bucket order
DEFAULT_PALETTE = (
    "rgba(255, 99, 132, 1)",
    "rgba(54, 162, 235, 1)",
    "rgba(255, 206, 86, 1)",
    "rgba(75, 192, 192, 1)",
    "rgba(153, 102, 255, 1)",
    "rgba(255, 159, 64, 1)",
)

ESTIMATOR_CONFIG = {
    'clearance_tail_days': int(os.getenv('CYCLEKINETICS_TAIL_DAYS', '28')),
    'palette': DEFAULT_PALETTE,
    'ode_rtol': 1e-8,
    'ode_atol': 1e-10,
}

# Amount units -> mg-equivalent multipliers
UNIT_CONFIG = {
    'mg': 1.0,
    'mcg': 0.001,
    'iu': 0.333,
}

LOG_CONFIG = {
    'level': os.getenv('CYCLEKINETICS_LOG_LEVEL', 'INFO').upper(),
    'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
}

VIEWER_CONFIG = {
    'title': 'Cycle Viz',
    'size': (1100, 680),
    'default_cycle_weeks': 12,
}
