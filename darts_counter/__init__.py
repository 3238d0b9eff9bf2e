"""
Darts counter - 301/501 scoring engine with a computer opponent.
"""
__version__ = "0.1.0"
