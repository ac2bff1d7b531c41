"""
A zoo of specimen programs, built by hand since there is no parser.

The specimens in `ok` ought to type-check. Each one in `fail` ought to fail,
and comes paired with the class of error it ought to fail with.

Each entry is a function which builds a brand-new tree, so no two trees share a node.
"""
from .algebra import Arrow
from .primitive import literal_number, literal_flag, literal_string
from .syntax import Lookup, Literal, TypedLambda, Let, TypedLet, lam, app
from .type_inference import UnboundVariable
from .unification import UnificationMismatch, OccursCheckFailure

def identity(): return lam("x", Lookup("x"))
def fst(): return lam("a", "b", Lookup("a"))
def apply(): return lam("f", "arg", app(Lookup("f"), Lookup("arg")))
def id_bool(): return TypedLambda("b", literal_flag, Lookup("b"))

ok = {
	"identity": identity,
	"fst": fst,
	"apply": apply,
	"fst_applied_to_one": lambda: app(fst(), Literal(1)),
	"let_id_in_id_id": lambda: Let("id", identity(), app(Lookup("id"), Lookup("id"))),
	"app_identity_string": lambda: app(identity(), Literal("hey!")),
	"id_bool": id_bool,
	"let_batata_annot_string_in_batata": lambda: TypedLet(
		"batata", literal_string, Literal("pure de batata"), Lookup("batata"),
	),
	"let_bar": lambda: Let("bar", identity(), Lookup("bar")),
	"let_pair_of_uses": lambda: Let(
		"id", identity(),
		app(fst(), app(Lookup("id"), Literal(1)), app(Lookup("id"), Literal(True))),
	),
	"typed_let_arrow": lambda: TypedLet(
		"inc", Arrow(literal_number, literal_number), identity(), app(Lookup("inc"), Literal(7)),
	),
}

fail = {
	"app_id_bool_to_string": (lambda: app(id_bool(), Literal("why?")), UnificationMismatch),
	"let_batata_annot_int_in_batata": (lambda: TypedLet(
		"batata", literal_string, Literal(42), Lookup("batata"),
	), UnificationMismatch),
	"self_application_through_lambda": (lambda: app(
		lam("id", app(Lookup("id"), Lookup("id"))), identity(),
	), OccursCheckFailure),
	"omega": (lambda: lam("x", app(Lookup("x"), Lookup("x"))), OccursCheckFailure),
	"unbound": (lambda: app(identity(), Lookup("nowhere")), UnboundVariable),
	"number_as_function": (lambda: app(Literal(3), Literal(4)), UnificationMismatch),
	"parameter_at_two_types_through_let": (lambda: lam("y", Let(
		"g", lam("x", app(Lookup("y"), Lookup("x"))),
		app(fst(), app(Lookup("g"), Literal(1)), app(Lookup("g"), Literal(True))),
	)), UnificationMismatch),
}

def everything() -> dict:
	return {**ok, **{name: build for name, (build, _) in fail.items()}}
