"""
Simulated database backends and their factory.
"""

from .backends import SimulatedDatabase, MySQLDatabase, PostgreSQLDatabase, MongoDatabase
from .factory import DatabaseFactory

__all__ = [
    "SimulatedDatabase",
    "MySQLDatabase",
    "PostgreSQLDatabase",
    "MongoDatabase",
    "DatabaseFactory",
]
