from .connection import Base, EdgeDatabase

__all__ = ["Base", "EdgeDatabase"]
