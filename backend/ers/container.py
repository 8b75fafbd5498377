# backend/ers/container.py
#
# Composition root: built once per app, handed to routers via app.state.

from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ers.core.config import Settings
from ers.core.database import Base, build_engine, build_session_factory
from ers.repositories.reimbursement_repo import ReimbursementRepository
from ers.repositories.user_repo import UserRepository
from ers.services.reimbursement_service import ReimbursementService
from ers.services.user_service import UserService

# registers the tables on Base.metadata
import ers.models.reimbursement  # noqa: F401
import ers.models.user  # noqa: F401


@dataclass
class Container:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    user_repo: UserRepository
    reimbursement_repo: ReimbursementRepository
    user_service: UserService
    reimbursement_service: ReimbursementService

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def build_container(settings: Settings) -> Container:
    engine = build_engine(settings.database_url)
    session_factory = build_session_factory(engine)

    user_repo = UserRepository(session_factory)
    reimbursement_repo = ReimbursementRepository(session_factory)

    return Container(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        user_repo=user_repo,
        reimbursement_repo=reimbursement_repo,
        user_service=UserService(user_repo),
        reimbursement_service=ReimbursementService(reimbursement_repo, user_repo),
    )
