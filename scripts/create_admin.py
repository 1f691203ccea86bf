"""Create an admin user, or promote an existing user to admin.

Usage:
    python -m scripts.create_admin <email> [password]
If the user does not exist and password is omitted, a random one is printed.
Requires DATABASE_URL and SECRET_KEY (environment or .env).
"""

import asyncio
import secrets
import sys

from app.domain.enums import UserRole
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    """Create or promote the admin identified by email."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_admin <email> [password]", file=sys.stderr)
        sys.exit(1)
    email = sys.argv[1].strip().lower()
    password = sys.argv[2] if len(sys.argv) > 2 else None

    database.get_engine()
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            user = await user_repo.get_by_email(email)
            if user is None:
                if not password:
                    password = secrets.token_urlsafe(12)
                    print(f"Password: {password}")
                user = await user_repo.create_user(email=email, password=password)
                print(f"Created user: {user.id} ({email})")
            await user_repo.set_role(user.id, UserRole.ADMIN)
            print(f"User {user.id} ({email}) is now admin")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
