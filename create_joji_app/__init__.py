"""Scaffold a React + Vite + Tailwind project."""

__version__ = "1.0.0"
