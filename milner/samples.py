from typing import Mapping

from .asts.base import Apply, ASTNode, Function, Let, Name, Scalar

identity = Function("x", Name("x"))

SAMPLES: Mapping[str, ASTNode] = {
    "identity": identity,
    "k_combinator": Function.curried(("x", "y"), Name("x")),
    "compose": Function.curried(
        ("f", "g", "x"), Apply(Name("f"), Apply(Name("g"), Name("x")))
    ),
    "let_polymorphism": Let("id", identity, Apply(Name("id"), Scalar(42))),
    "polymorphic_reuse": Let(
        "id",
        identity,
        Apply.curried(
            Name("if"),
            Apply(Name("id"), Scalar(True)),
            Apply(Name("id"), Scalar(1)),
            Scalar(2),
        ),
    ),
    "increment": Let(
        "inc",
        Apply(Name("add"), Scalar(1)),
        Apply(Name("inc"), Apply(Name("inc"), Scalar(40))),
    ),
    "monomorphic_param": Function(
        "f", Apply.curried(Name("const"), Apply(Name("f"), Scalar(1)), Name("f"))
    ),
    "mismatch": Apply(Apply(identity, Scalar(True)), Scalar(42)),
    "self_application": Function("x", Apply(Name("x"), Name("x"))),
    "unbound": Name("x"),
}
