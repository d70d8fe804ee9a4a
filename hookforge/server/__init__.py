"""HOOKFORGE FastAPI Server"""
from .client import HookforgeClient

__all__ = ['HookforgeClient']
