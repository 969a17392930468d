"""Tests for migration file syntax and structure."""

import importlib.util
from pathlib import Path

from blogfeed.db.models import Base


MIGRATIONS_DIR = Path(__file__).parent.parent.parent / "migrations"


class TestMigrationSyntax:
    """Test that migration files are syntactically correct."""

    def test_initial_migration_imports(self):
        migration_files = list((MIGRATIONS_DIR / "versions").glob("*_initial_schema.py"))
        assert len(migration_files) == 1, "Should have exactly one initial schema migration"
        
        spec = importlib.util.spec_from_file_location("migration", migration_files[0])
        migration_module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(migration_module)
        
        assert callable(migration_module.upgrade)
        assert callable(migration_module.downgrade)
        assert isinstance(migration_module.revision, str)
        assert migration_module.down_revision is None

    def test_alembic_env_syntax(self):
        content = (MIGRATIONS_DIR / "env.py").read_text()
        
        assert "from alembic import context" in content
        assert "def run_migrations_offline()" in content
        assert "def run_migrations_online()" in content
        assert "from blogfeed.db.models import Base" in content

    def test_models_match_migration_tables(self):
        assert set(Base.metadata.tables) == {"users", "posts"}
        
        posts = Base.metadata.tables["posts"]
        assert [c.name for c in posts.columns] == ["id", "title", "content", "author_id"]
        assert posts.c.content.nullable is True
        assert posts.c.title.nullable is False
        
        users = Base.metadata.tables["users"]
        assert [c.name for c in users.columns] == ["id", "name", "email"]
        assert users.c.email.unique is True
