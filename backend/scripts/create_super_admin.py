"""Bootstrap the first super admin (user + manager profile).

Every admin route needs a signed-in super admin, so the very first one
has to be created out of band with this script.
"""

import argparse
import asyncio
import getpass
import sys

from editfolio.config import Settings, get_settings, to_async_database_url
from editfolio.core.domain_types import UserRole
from editfolio.core.errors import EditfolioError
from editfolio.core.user_commands import CreateAdminUser
from editfolio.infrastructure.database import close_db, init_db
from editfolio.infrastructure.manager_repository import SqlAlchemyManagerRepository
from editfolio.infrastructure.observability import setup_logging
from editfolio.infrastructure.token_adapter import JwtTokenGenerator
from editfolio.infrastructure.user_repository import SqlAlchemyUserRepository
from editfolio.services.user_use_case import UserUseCase

MIN_PASSWORD_LENGTH = 12


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an Editfolio super admin")
    parser.add_argument("name", help="Display name for the manager profile")
    parser.add_argument("email", help="Unique email address used as the login")
    parser.add_argument("--nickname", default=None, help="Nickname (defaults to name)")
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (defaults to DATABASE_URL / settings)",
    )
    return parser.parse_args(argv)


def prompt_for_password() -> str:
    for _ in range(3):
        password = getpass.getpass("Password: ")
        confirm = getpass.getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match. Try again.", file=sys.stderr)
            continue
        if len(password) < MIN_PASSWORD_LENGTH:
            print(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.",
                file=sys.stderr,
            )
            continue
        return password
    raise SystemExit("Failed to set password after three attempts.")


def resolve_database_url(args: argparse.Namespace, settings: Settings) -> str:
    """--database-url wins over settings; both end up on the async driver."""
    return to_async_database_url(args.database_url or settings.database_url)


async def create_super_admin(
    database_url: str, cmd: CreateAdminUser,
) -> str:
    settings = get_settings()
    db = init_db(database_url)
    try:
        use_case = UserUseCase(
            SqlAlchemyUserRepository(db),
            SqlAlchemyManagerRepository(db),
            JwtTokenGenerator(settings.jwt_secret, settings.jwt_algorithm),
            timeout_seconds=settings.use_case_timeout_seconds,
        )
        new_id = await use_case.create_admin_user(cmd, role=UserRole.SUPER_ADMIN)
        return str(new_id)
    finally:
        await close_db()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    password = prompt_for_password()

    email = args.email.strip().lower()
    cmd = CreateAdminUser(
        name=args.name.strip(),
        email=email,
        password=password,
        nickname=(args.nickname or args.name).strip(),
    )
    try:
        new_id = asyncio.run(
            create_super_admin(resolve_database_url(args, settings), cmd),
        )
    except EditfolioError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    print(f"Created super admin {new_id}: {cmd.name} <{email}>")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
