"""
2D point-mass flight dynamics simulator.

Advances aircraft position and velocity under lift, drag, thrust and weight
in the International Standard Atmosphere, optionally closed-loop controlled
by PID airspeed and altitude autopilots.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
