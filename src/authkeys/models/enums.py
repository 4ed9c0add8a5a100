"""
Enums for API key models.
"""

from enum import Enum


class Action(str, Enum):
    """Capabilities that can be granted to an API key.

    Values are the names used on the wire.
    """

    ALL = "*"
    SEARCH = "search"

    # Documents
    DOCUMENTS_ADD = "documents.add"
    DOCUMENTS_GET = "documents.get"
    DOCUMENTS_DELETE = "documents.delete"

    # Indexes
    INDEXES_CREATE = "indexes.create"
    INDEXES_GET = "indexes.get"
    INDEXES_UPDATE = "indexes.update"
    INDEXES_DELETE = "indexes.delete"

    TASKS_GET = "tasks.get"

    # Settings
    SETTINGS_GET = "settings.get"
    SETTINGS_UPDATE = "settings.update"

    STATS_GET = "stats.get"
    DUMPS_CREATE = "dumps.create"
    VERSION = "version"
