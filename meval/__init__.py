# Core type aliases for the meval data model.
# Plain Python types (int, float, str, bool, list) represent both expressions
# and runtime values; Symbol, Nil, Procedure, Primitive and Thunk cover the rest.
#
# Naming guidance:
# - SExpression: use in reader/desugar code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: what special forms and strategies call back into
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
