# pylint: disable=C0114
from .cascade import sample, cascade

__all__ = ['sample', 'cascade']
