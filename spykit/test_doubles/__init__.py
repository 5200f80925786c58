from .base import SpyBase

__all__ = ["SpyBase"]
