"""
Plain-data renderings of the pipeline artifacts and the files the driver
writes: tokens.txt, ast.txt and semantic_analysis.txt.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .lexer import Token
from .parser import Program
from .analyzer import SymbolTable

TOKENS_FILENAME = "tokens.txt"
AST_FILENAME = "ast.txt"
SYMBOLS_FILENAME = "semantic_analysis.txt"


def tokens_to_pairs(tokens: List[Token]) -> List[Tuple[str, str]]:
    return [token.as_pair() for token in tokens]


def tokens_to_text(tokens: List[Token]) -> str:
    """One "value,Kind" line per token."""
    return "\n".join(str(token) for token in tokens)


def ast_to_json(ast: Program, indent: Union[int, None] = None) -> str:
    return json.dumps(ast.to_dict(), ensure_ascii=False, indent=indent)


def symbols_to_json(symbol_table: SymbolTable, indent: Union[int, None] = None) -> str:
    return json.dumps(symbol_table.as_dict(), ensure_ascii=False, indent=indent)


def result_to_dict(result) -> Dict[str, Any]:
    """All three artifacts of a FrontendResult as one JSON-ready document."""
    return {
        "tokens": [list(pair) for pair in tokens_to_pairs(result.tokens)],
        "ast": result.ast.to_dict(),
        "symbols": result.symbol_table.as_dict(),
    }


def write_artifacts(result, output_dir: Union[str, Path], encoding: str = "utf-8") -> Dict[str, Path]:
    """
    Write the token, AST and symbol table dumps into output_dir.

    Returns:
        Mapping of artifact name ("tokens", "ast", "symbols") to the file written
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    contents = {
        "tokens": (TOKENS_FILENAME, tokens_to_text(result.tokens)),
        "ast": (AST_FILENAME, ast_to_json(result.ast)),
        "symbols": (SYMBOLS_FILENAME, symbols_to_json(result.symbol_table)),
    }

    written = {}
    for name, (filename, text) in contents.items():
        path = output_dir / filename
        with open(path, 'w', encoding=encoding) as f:
            f.write(text)
        written[name] = path

    return written
