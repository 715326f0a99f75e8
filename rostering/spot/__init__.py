# rostering/spot/__init__.py
from .models import Spot, SPOT

__all__ = ["Spot", "SPOT"]
