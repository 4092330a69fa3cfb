"""
E-commerce authentication backend.

Layers:
    domain          entities, value objects and ports (Protocols)
    application     use cases (login, sign-up, forgot password)
    infrastructure  reference adapters (argon2, JWT, in-memory storage)
    crosscutting    config, logging, typed errors
"""

__version__ = "0.1.0"
