"""Services Layer - student persistence service and the request handler.

Invariants:
    - Services depend on core Protocols, never on api/ modules
"""
