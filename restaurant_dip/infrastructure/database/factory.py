"""Database factory: configuration key to database backend."""

from enum import Enum
from typing import Dict, Type, Union

from restaurant_dip.core.domain.services import DatabaseService
from restaurant_dip.infrastructure.database.backends import MySQLDatabase, PostgreSQLDatabase, MongoDatabase
from restaurant_dip.infrastructure.registry import ServiceRegistry
from restaurant_dip.shared.types import DatabaseType


class DatabaseFactory(ServiceRegistry[DatabaseService]):
    """Creates database backends from keys such as ``"mysql"``."""

    service_kind = "database"
    _registry: Dict[str, Type[DatabaseService]] = {
        DatabaseType.MYSQL.value: MySQLDatabase,
        DatabaseType.POSTGRESQL.value: PostgreSQLDatabase,
        DatabaseType.MONGODB.value: MongoDatabase,
    }

    @classmethod
    def create_database(cls, database_type: Union[str, Enum]) -> DatabaseService:
        return cls.create(database_type)
