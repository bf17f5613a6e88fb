"""
Gateway Sessions - Signed Session ID Toolkit

Stateless, forgery-resistant session identifiers for an API gateway.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- sessions: Signed session ID generation and validation
- middleware: Reading and writing session IDs on HTTP requests
"""

__version__ = "1.0.0"
