"""Data models for the purge actions."""
from .record import Record
from .tally import Tally
from .impact_summary import ImpactSummary

__all__ = ['Record', 'Tally', 'ImpactSummary']
