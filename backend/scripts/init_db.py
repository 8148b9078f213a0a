"""Initialize the database - creates all tables and the blog search index."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.database import engine, Base
import portfolio.models  # noqa: F401 - registers all models
from portfolio.utils.search_index import ensure_search_index


def init_db():
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)
    print("Rebuilding blog search index...")
    ensure_search_index(engine)
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
