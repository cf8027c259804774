"""
Front-end configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class FrontendConfig:
    """Configuration for one run of the front-end pipeline"""

    # Lexing
    strip_string_quotes: bool = True   # False keeps the quotes in string token values
    encoding: str = "utf-8"

    # Semantic traversal
    strict_traversal: bool = False     # Re-check BinOp operand types in the second pass

    # Driver output
    output_dir: Union[str, Path] = "."
    emit_files: bool = True
    verbose: bool = True

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
