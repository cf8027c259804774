#!/usr/bin/env python3
"""
Main test runner for the minilang front-end tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_smoke_test() -> bool:
    """Run the bundled sample program through every stage."""

    print("🚀 minilang Front-End Test Suite")
    print("=" * 60)

    try:
        from minilang.lexer.lexer import Lexer
        from minilang.parser.parser import Parser
        from minilang.analyzer.semantic_analyzer import SemanticAnalyzer
        from minilang.sample import SAMPLE_PROGRAM

        print("✅ All front-end modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import front-end modules: {e}")
        return False

    print("Testing sample program pipeline...")
    try:
        print("  🔧 Lexing...")
        tokens = Lexer(SAMPLE_PROGRAM).tokenize()
        print(f"     Generated {len(tokens)} tokens")

        print("  🔧 Parsing...")
        ast = Parser(tokens).parse()
        print(f"     Generated AST with {len(ast.body)} top-level statements")

        print("  🔧 Semantic Analysis...")
        symbols = SemanticAnalyzer().analyze(ast)
        print(f"     Symbol table: {symbols.as_dict()}")

        print("✅ Pipeline smoke test passed")
        print()
        return True

    except Exception as e:
        print(f"❌ Pipeline smoke test failed: {e}")
        return False


def run_all_tests() -> bool:
    """Run the smoke test and then the unit test suite."""
    if not run_pipeline_smoke_test():
        return False

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
