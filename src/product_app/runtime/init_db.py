"""Database initialization script."""

from src.product_app.core.services import DbManageService, DbSessionService


def init_db(drop: bool = False) -> None:
    """Create all database tables, optionally dropping them first."""
    database_service = DbSessionService()
    db_manage_service = DbManageService(database_service.engine)
    try:
        if drop:
            db_manage_service.drop_all()
        db_manage_service.create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
