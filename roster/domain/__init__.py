"""Domain objects and validation rules."""

from .employees import Employee

__all__ = ["Employee"]
