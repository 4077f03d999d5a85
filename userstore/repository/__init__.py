"""Repository layer: SQL helpers for tb_usuarios.

Keep functions thin, so the entity avoids SQL strings.
"""
from __future__ import annotations
