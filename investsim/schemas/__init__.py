"""Pydantic contracts shared by the engine and the HTTP layer."""
