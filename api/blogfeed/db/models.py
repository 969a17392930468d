"""SQLAlchemy models for the Blog Feed schema."""

from sqlalchemy import Column, Integer, Text, ForeignKey, Index
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy import create_engine

from .connection import get_database_url

# Create base class for models
Base = declarative_base()


class User(Base):
    """Users table model."""
    __tablename__ = 'users'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    email = Column(Text, nullable=False, unique=True)
    
    posts = relationship("Post", back_populates="author", order_by="Post.id")


class Post(Base):
    """Posts table model."""
    __tablename__ = 'posts'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text)
    author_id = Column(Integer, ForeignKey('users.id', ondelete='SET NULL'))
    
    author = relationship("User", back_populates="posts")
    
    __table_args__ = (
        Index('posts_author_id_idx', 'author_id', 'id'),
    )


def create_engine_from_env():
    """Create SQLAlchemy engine from settings."""
    return create_engine(get_database_url())
