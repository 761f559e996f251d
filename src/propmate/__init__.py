"""
PropMate - motor de matching cliente ↔ propiedad para agentes inmobiliarios.
"""

__version__ = "0.1.0"
