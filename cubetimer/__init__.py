"""Terminal speedcubing timer with scrambles, inspection, averages and solve history."""

__version__ = "0.1.0"