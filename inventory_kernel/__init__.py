"""
Inventory Kernel

Domain values, clock, structured logging and typed errors shared by the
inventory engines, ingestion and services:
- Immutable item and supplier records
- Injectable clock (no implicit "now")
- Structured JSON logging
- Typed exception hierarchy
"""

__version__ = "0.1.0"
