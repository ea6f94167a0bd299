"""
PersonaCart backend: family profiles, personalized catalog and shopping cart.
"""

__version__ = "1.0.0"
