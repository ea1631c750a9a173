"""
Environment models for flight simulation.

This module provides the standard atmosphere.
"""

from .atmosphere import StandardAtmosphere, AtmosphereSample

__all__ = ['StandardAtmosphere', 'AtmosphereSample']
