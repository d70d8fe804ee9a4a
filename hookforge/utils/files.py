"""
File I/O utilities
"""

import os
import uuid
from typing import Optional

from ..core.config import load_settings


def save_contract(source: str,
                  base_name: Optional[str] = None,
                  output_dir: Optional[str] = None) -> str:
    """
    Save generated Solidity to disk.

    Args:
        source: Solidity source code
        base_name: Optional base filename (without extension)
        output_dir: Directory to write to (default: HOOKFORGE_OUTPUT_DIR)

    Returns:
        Path of the written .sol file
    """
    directory = output_dir or load_settings().output_dir
    os.makedirs(directory, exist_ok=True)

    base = base_name or f"hook_{uuid.uuid4().hex[:8]}"
    path = os.path.join(directory, f"{base}.sol")

    with open(path, "w", encoding="utf-8") as f:
        f.write(source)

    return path
