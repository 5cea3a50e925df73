"""Investment growth simulator: compound, fixed-income and mixed strategies."""

__version__ = "0.1.0"
