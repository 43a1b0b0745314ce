"""TrafficAI – answers "how's traffic from X to Y?" with live Google Maps data."""

import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
