# Safe arithmetic evaluation
"""
Arithmetic evaluator for the calculator tool.

Only numbers, + - * / % // **, parentheses and unary +/- are accepted.
Names, calls, attribute access and any other syntax are rejected.
"""
import ast
import math
import operator as op
from typing import Union

Number = Union[int, float]

_BIN_OPS = {
    ast.Add: op.add,
    ast.Sub: op.sub,
    ast.Mult: op.mul,
    ast.Div: op.truediv,
    ast.Mod: op.mod,
    ast.Pow: op.pow,
    ast.FloorDiv: op.floordiv,
}

_UNARY_OPS = {
    ast.UAdd: op.pos,
    ast.USub: op.neg,
}

# Caps on exponent and result size so chained powers can't hang the worker
MAX_EXPONENT = 1000
MAX_RESULT_BITS = 100_000


def _check_power(base: Number, exponent: Number):
    if abs(exponent) > MAX_EXPONENT:
        raise ValueError(f"Exponent too large: {exponent}")
    if abs(base) > 1 and exponent > 0 and exponent * math.log2(abs(base)) > MAX_RESULT_BITS:
        raise ValueError("Result too large")


def _eval_node(node: ast.AST) -> Number:
    if isinstance(node, ast.Expression):
        return _eval_node(node.body)

    if isinstance(node, ast.Constant):
        if isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
            return node.value
        raise ValueError(f"Unsupported constant: {node.value!r}")

    if isinstance(node, ast.BinOp):
        op_type = type(node.op)
        if op_type not in _BIN_OPS:
            raise ValueError(f"Unsupported operator: {op_type.__name__}")
        left = _eval_node(node.left)
        right = _eval_node(node.right)
        if op_type is ast.Pow:
            _check_power(left, right)
        return _BIN_OPS[op_type](left, right)

    if isinstance(node, ast.UnaryOp):
        op_type = type(node.op)
        if op_type not in _UNARY_OPS:
            raise ValueError(f"Unsupported operator: {op_type.__name__}")
        return _UNARY_OPS[op_type](_eval_node(node.operand))

    raise ValueError(f"Unsupported expression: {type(node).__name__}")


def evaluate(expression: str) -> Number:
    """
    Evaluate an arithmetic expression

    Raises:
        ValueError: expression is not plain arithmetic
        ZeroDivisionError: division by zero
    """
    try:
        tree = ast.parse(expression.strip(), mode="eval")
    except SyntaxError as e:
        raise ValueError(f"Invalid expression: {e.msg}") from e
    return _eval_node(tree)
