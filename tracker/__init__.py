"""
Freelancer time tracking and invoicing service.
"""

__version__ = "1.0.0"
