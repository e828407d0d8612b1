"""Persistence adapters: SQLModel tables, mappers and repositories."""
