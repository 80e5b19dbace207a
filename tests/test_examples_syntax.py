import ast
from pathlib import Path

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def test_examples_are_syntax_valid_and_use_the_public_api() -> None:
    examples = sorted(EXAMPLES.glob("*.py"))
    assert examples

    for path in examples:
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        modules = {
            node.module
            for node in ast.walk(tree)
            if isinstance(node, ast.ImportFrom) and node.module is not None
        }
        assert any(module.split(".")[0] == "artifactkit" for module in modules), path.name
        functions = {node.name for node in tree.body if isinstance(node, ast.FunctionDef)}
        assert "main" in functions, path.name
