"""Seed the database with an admin account and sample contents."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.database import SessionLocal, engine, Base
import portfolio.models  # noqa: F401
from portfolio.models.admin import Admin
from portfolio.models.content import Content
from portfolio.services.admin_service import hash_password
from portfolio.utils.search_index import ensure_search_index


def seed():
    Base.metadata.create_all(bind=engine)
    ensure_search_index(engine)
    db = SessionLocal()
    try:
        if db.query(Admin).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # Admin (override via ADMIN_USERNAME / ADMIN_EMAIL / ADMIN_PASSWORD)
        admin = Admin(
            username=os.getenv("ADMIN_USERNAME", "admin"),
            email=os.getenv("ADMIN_EMAIL", "admin@portfolio.dev"),
            password_hash=hash_password(os.getenv("ADMIN_PASSWORD", "admin123")),
        )
        db.add(admin)

        # Contents
        contents = [
            Content(language="en", type="blog", title="Hello from the portfolio",
                    body="First post of the portfolio blog.", meta_tag="intro", featured=True),
            Content(language="ru", type="blog", title="Привет",
                    body="Первый пост.", meta_tag="intro"),
            Content(language="en", type="project", title="Portfolio backend",
                    body="FastAPI + SQLite FTS5 search backend.", meta_tag="python,fastapi"),
        ]
        db.add_all(contents)
        db.commit()
        print(f"Seeded admin '{admin.username}' and {len(contents)} contents.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
