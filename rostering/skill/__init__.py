# rostering/skill/__init__.py
from .models import Skill, SKILL

__all__ = ["Skill", "SKILL"]
