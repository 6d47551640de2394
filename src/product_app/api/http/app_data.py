from dataclasses import dataclass

from src.product_app.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
