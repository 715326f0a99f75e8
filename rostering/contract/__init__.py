# rostering/contract/__init__.py
from .models import Contract, CONTRACT

__all__ = ["Contract", "CONTRACT"]
