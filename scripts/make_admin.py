#!/usr/bin/env python3
"""
Grant the admin role to a user who has signed in at least once.
Usage: python scripts/make_admin.py <email>
"""

import asyncio
import logging
import sys

from voices.db.database import SessionLocal
from voices.domain.repositories.unit_of_work import IUnitOfWork
from voices.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl

logger = logging.getLogger("make_admin")


async def make_user_admin(unit_of_work: IUnitOfWork, email: str) -> bool:
    """Make a user an admin by email."""
    async with unit_of_work:
        user = await unit_of_work.users.get_by_email(email)
        if user is None:
            logger.error(f"User with email '{email}' not found; they must sign in first")
            return False

        user.promote_to_admin()
        await unit_of_work.users.update(user)
        await unit_of_work.commit()

    logger.info(f"Successfully made '{email}' an admin")
    return True


def main(email: str) -> bool:
    db = SessionLocal()
    try:
        return asyncio.run(make_user_admin(UnitOfWorkImpl(db), email))
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(0 if main(sys.argv[1]) else 1)
