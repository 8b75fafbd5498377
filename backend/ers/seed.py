# backend/ers/seed.py
#
#   python -m ers.seed
#
# Creates tables and seeds one account per role when the users table is empty.

import logging

from ers.container import Container, build_container
from ers.core.config import get_settings
from ers.core.errors import ResourcePersistenceError
from ers.core.logger import configure_logging
from ers.domain.entities import Role, User

logger = logging.getLogger(__name__)

# Change these creds anytime (dev defaults)
SEED_USERS = [
    User(username="admin", password="admin123", first_name="Ada", last_name="Admin",
         email="admin@ers.local", role=Role.ADMIN.value),
    User(username="manager", password="manager123", first_name="Max", last_name="Manager",
         email="manager@ers.local", role=Role.MANAGER.value),
    User(username="employee", password="employee123", first_name="Eve", last_name="Employee",
         email="employee@ers.local", role=Role.EMPLOYEE.value),
]


def seed_users_if_empty(container: Container) -> int:
    if container.user_repo.get_all():
        logger.info("users table not empty, skipping seed")
        return 0

    created = 0
    for u in SEED_USERS:
        try:
            container.user_service.add_new_user(u)
        except ResourcePersistenceError:
            logger.warning("seed user %s already exists", u.username)
            continue
        created += 1
        logger.info("created %s (%s)", u.username, u.role)
    return created


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    container = build_container(settings)
    try:
        container.create_tables()
        created = seed_users_if_empty(container)
        logger.info("seed done, created %d user(s)", created)
    finally:
        container.dispose()


if __name__ == "__main__":
    main()
