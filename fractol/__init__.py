"""Fractal rendering on the complex plane, with view controls and image output."""

__version__ = "1.0.0"