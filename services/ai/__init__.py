"""
AI Services
Language model access and the companion's prompt text
"""

from .model_client import ModelClient
from .prompts import build_system_prompt

__all__ = ['ModelClient', 'build_system_prompt']
