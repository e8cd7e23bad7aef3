"""Database initialization script."""
import argparse
import asyncio

from goal_tracker.database import init_db, AsyncSessionLocal
from goal_tracker.exceptions import ValidationError
from goal_tracker.schemas.auth import RegisterRequest
from goal_tracker.services import auth_service


async def init_database(demo_email: str = None, demo_password: str = None):
    """Create all tables and optionally seed a demo account."""
    print("Creating database tables...")
    await init_db()
    print("Tables created successfully!")

    if demo_email:
        async with AsyncSessionLocal() as db:
            try:
                user = await auth_service.register_user(
                    db,
                    RegisterRequest(name="Demo", email=demo_email, password=demo_password),
                )
                print(f"Demo user created: {user.email}")
            except ValidationError as exc:
                print(f"Demo user not created: {exc.detail}")

    print("Database initialization complete!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the goal tracker tables.")
    parser.add_argument("--demo-email", help="seed a demo account with this email")
    parser.add_argument("--demo-password", default="secret1")
    args = parser.parse_args()
    asyncio.run(init_database(args.demo_email, args.demo_password))
