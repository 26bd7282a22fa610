"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like graph storage
(CSV files) and the routing algorithm.
"""
