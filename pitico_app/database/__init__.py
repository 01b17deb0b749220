from .connection import Base, engine, SessionLocal, get_db, init_db

__all__ = ["Base", "engine", "SessionLocal", "get_db", "init_db"]
