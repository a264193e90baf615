from .database import Database, init_database, STATUS_TRANSITIONS
from .gateway import DatabaseGateway

__all__ = ["Database", "init_database", "STATUS_TRANSITIONS", "DatabaseGateway"]
