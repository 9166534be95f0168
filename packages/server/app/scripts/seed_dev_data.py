"""
Seed a development database with a demo user, workspace, tasks and a comment.

Usage:
    taskflow-seed --email alice@example.com --password devpass [--create-tables]

Requires DATABASE_URL. Running it twice is a no-op for an existing email.
"""

import argparse
import asyncio
import sys

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.config import get_settings
from app.core.database import dispose_engine, get_session_context, init_db
from app.core.logging import configure_logging
from app.core.security import hash_password
from app.models import Comment, Task, User, Workspace, WorkspaceMember

log = structlog.get_logger()


async def seed_workspace(session: AsyncSession, name: str, email: str, password: str) -> Workspace | None:
    """Insert the demo rows. Returns None when the user already exists."""
    result = await session.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none() is not None:
        log.info("seed.skipped", email=email, reason="user exists")
        return None

    user = User(name=name, email=email, password_hash=hash_password(password))
    session.add(user)
    await session.flush()

    workspace = Workspace(
        name=f"{name}'s Workspace",
        description="Demo workspace created by seed_dev_data.",
        created_by_id=user.id,
    )
    session.add(workspace)
    await session.flush()

    session.add(WorkspaceMember(workspace_id=workspace.id, user_id=user.id, role="owner"))

    first = Task(
        title="Set up the project board",
        workspace_id=workspace.id,
        created_by_id=user.id,
        assignee_id=user.id,
    )
    session.add(first)
    session.add(
        Task(
            title="Write the onboarding guide",
            description="Cover workspaces, tasks and comments.",
            status="in_progress",
            priority="high",
            workspace_id=workspace.id,
            created_by_id=user.id,
        )
    )
    await session.flush()

    session.add(Comment(content="Started on this today.", task_id=first.id, user_id=user.id))
    log.info("seed.created", email=email, workspace_id=workspace.id)
    return workspace


async def seed(name: str, email: str, password: str, create_tables: bool) -> None:
    try:
        if create_tables:
            await init_db()
        async with get_session_context() as session:
            await seed_workspace(session, name, email, password)
    finally:
        await dispose_engine()


def run() -> None:
    parser = argparse.ArgumentParser(description="Seed TaskFlow with demo data.")
    parser.add_argument("--name", default="Alice", help="Display name of the demo user")
    parser.add_argument("--email", required=True, help="Email of the demo user")
    parser.add_argument("--password", required=True, help="Password of the demo user")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables from the models first (skip when using migrations)",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level, "text")
    if not settings.database_url:
        print("Error: DATABASE_URL is not defined", file=sys.stderr)
        sys.exit(1)

    asyncio.run(seed(args.name, args.email, args.password, args.create_tables))


if __name__ == "__main__":
    run()
