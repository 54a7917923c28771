"""
Script to grant admin membership to an existing user.

Usage:
    python grant_admin.py user@example.com
"""
import sys
from sqlmodel import Session
from flashdrill.core.database import engine, init_db
from flashdrill.core.exceptions import NotFoundError
from flashdrill.services.user_service import grant_admin
import logging

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        logger.error("Usage: python grant_admin.py <email>")
        return 2

    email = argv[1]
    init_db()
    with Session(engine) as session:
        try:
            created = grant_admin(session, email)
        except NotFoundError as e:
            logger.error(str(e))
            return 1

    if created:
        logger.info(f"{email} is now an admin")
    else:
        logger.info(f"{email} was already an admin")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
