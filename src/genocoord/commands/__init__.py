"""Command modules for the genocoord CLI."""

from __future__ import annotations

from genocoord.commands.locus import run_locus
from genocoord.commands.convert import run_convert

__all__ = ['run_locus', 'run_convert']
