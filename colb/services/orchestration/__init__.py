"""
Sequencing of build and test steps.
"""

from .coordinator import Coordinator

__all__ = ["Coordinator"]
