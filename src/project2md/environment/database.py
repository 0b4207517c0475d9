"""Database server version probe.

The probe is optional in every sense: it needs a database URL, the ``database`` extra
(SQLAlchemy) and a reachable server. If anything is missing the probe reports None
and the report shows the database as unavailable.
"""

import importlib.util
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "select version()"
SQLITE_QUERY = "select sqlite_version()"


def check_sqlalchemy_available() -> bool:
    """Check if the SQLAlchemy library is available.

    Returns:
        True if SQLAlchemy is installed, False otherwise.
    """
    return importlib.util.find_spec("sqlalchemy") is not None


class DatabaseProbe:
    """Asks a database server for its version with a single query.

    Attributes:
        url (Optional[str]): SQLAlchemy database URL.
        query (Optional[str]): Version query; by default ``select version()``, or
            ``select sqlite_version()`` for SQLite URLs.

    Example:
        >>> DatabaseProbe(None).server_version() is None
        True
    """

    def __init__(self, url: Optional[str], query: Optional[str] = None) -> None:
        self.url = url
        self.query = query

    def server_version(self) -> Optional[str]:
        """Run the version query.

        Returns:
            None if the database cannot be queried for any reason, an empty string if
            the query succeeded without a value, and the version string otherwise.
        """
        if not self.url:
            return None
        if not check_sqlalchemy_available():
            logger.debug("SQLAlchemy is not installed; install the 'database' extra to probe databases")
            return None

        from sqlalchemy import create_engine, text

        try:
            engine = create_engine(self.url)
        except Exception as e:
            logger.debug("Cannot create engine for database: %s", e)
            return None

        query = self.query or (SQLITE_QUERY if engine.dialect.name == "sqlite" else DEFAULT_QUERY)
        try:
            with engine.connect() as connection:
                value = connection.execute(text(query)).scalar()
        except Exception as e:
            logger.debug("Database version query failed: %s", e)
            return None
        finally:
            engine.dispose()
        return "" if value is None else str(value)
