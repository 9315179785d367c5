from .db_deps import get_db_session

__all__ = ["get_db_session"]
