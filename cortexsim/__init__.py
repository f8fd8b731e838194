"""Simulation of cortical minicolumns with astrocyte support and Hebbian learning."""

__version__ = "0.1.0"