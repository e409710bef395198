"""Infrastructure layer - adapters implementing domain protocols.

Structure:
- logging/: structlog-backed LoggerProtocol adapters
- serialization/: JSON rendering of projected domain objects
"""
