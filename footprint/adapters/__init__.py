"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Key-value storage (JSON file, in-memory)
- The boundary dataset endpoint (HTTP)
- Caching (in-memory, single-flight)
"""
