"""
Restaurant order processing built around the Dependency Inversion Principle.
"""

__version__ = "1.0.0"
