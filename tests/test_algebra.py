import unittest

from hmlevels.algebra import (
	Opaque, Hole, Generalized, Arrow, Scheme,
	resolve, force, free_holes, instantiate, generalize,
)
from hmlevels.primitive import literal_number, literal_flag, literal_string, literal_type

class HoleTests(unittest.TestCase):

	def test_fresh_hole_is_empty(self):
		h = Hole("t_0", 2)
		assert h.is_empty()
		self.assertEqual("t_0", h.state.debug_name)
		self.assertEqual(2, h.state.birth_level)

	def test_fill_is_visible_through_every_alias(self):
		h = Hole("t_0", 0)
		a = Arrow(h, h)
		h.fill(literal_number)
		self.assertIs(literal_number, resolve(a.domain))
		self.assertIs(literal_number, resolve(a.codomain))
		self.assertEqual("Int -> Int", str(a))

	def test_refill_is_a_bug(self):
		h = Hole("t_0", 0)
		h.fill(literal_number)
		with self.assertRaises(AssertionError):
			h.fill(literal_flag)

	def test_identity_not_name(self):
		self.assertIsNot(Hole("t_0", 0), Hole("t_0", 0))
		self.assertNotEqual(Hole("t_0", 0), Hole("t_0", 0))

	def test_resolve_follows_chains(self):
		a, b = Hole("a", 0), Hole("b", 0)
		a.fill(b)
		self.assertIs(b, resolve(a))
		b.fill(literal_string)
		self.assertIs(literal_string, resolve(a))

	def test_force(self):
		a, b = Hole("a", 0), Hole("b", 0)
		a.fill(Arrow(b, literal_flag))
		forced = force(Arrow(a, a))
		assert isinstance(forced, Arrow)
		assert isinstance(forced.domain, Arrow)
		self.assertIs(b, forced.domain.domain)
		self.assertIs(literal_flag, forced.codomain.codomain)

	def test_free_holes_in_walking_order(self):
		a, b, c = Hole("a", 0), Hole("b", 0), Hole("c", 0)
		c.fill(a)
		self.assertEqual([b, a], free_holes(Arrow(Arrow(b, c), Arrow(a, b))))

class RenderTests(unittest.TestCase):

	def test_arrows_associate_right(self):
		a = Hole("a", 0)
		self.assertEqual("a -> Int -> Bool", str(Arrow(a, Arrow(literal_number, literal_flag))))

	def test_arrow_on_the_left_gets_parentheses(self):
		self.assertEqual("(Int -> Int) -> Int", str(Arrow(Arrow(literal_number, literal_number), literal_number)))

	def test_filled_hole_renders_its_content(self):
		h = Hole("t_9", 0)
		self.assertEqual("t_9 -> t_9", str(Arrow(h, h)))
		h.fill(Arrow(literal_string, literal_string))
		self.assertEqual("(String -> String) -> String -> String", str(Arrow(h, h)))

	def test_generalized(self):
		self.assertEqual("gen_0 -> gen_1", str(Arrow(Generalized(0), Generalized(1))))
		self.assertEqual("forall t_1. gen_0 -> gen_0", str(Scheme(("t_1",), Arrow(Generalized(0), Generalized(0)))))

class PrimitiveTests(unittest.TestCase):

	def test_literal_types(self):
		self.assertIs(literal_number, literal_type(42))
		self.assertIs(literal_flag, literal_type(True))
		self.assertIs(literal_string, literal_type("text"))

	def test_not_a_literal(self):
		with self.assertRaises(TypeError):
			literal_type(4.5)

	def test_opaque_equality_is_by_name(self):
		self.assertEqual(Opaque("Int"), literal_number)
		self.assertNotEqual(Opaque("a"), Opaque("b"))

class GeneralizeTests(unittest.TestCase):

	def test_only_deeper_holes_are_quantified(self):
		outer, inner = Hole("outer", 0), Hole("inner", 1)
		typ = Arrow(inner, outer)
		self.assertEqual(1, generalize(typ, 0))
		assert outer.is_empty()
		self.assertIsInstance(inner.content, Generalized)
		self.assertEqual(0, inner.content.index)

	def test_same_level_is_not_deeper(self):
		h = Hole("h", 1)
		self.assertEqual(0, generalize(Arrow(h, h), 1))
		assert h.is_empty()

	def test_order_is_depth_first_domain_first(self):
		a, b, c = Hole("a", 1), Hole("b", 1), Hole("c", 1)
		through = Hole("through", 0)
		through.fill(b)
		typ = Arrow(Arrow(c, through), Arrow(a, c))
		self.assertEqual(3, generalize(typ, 0))
		self.assertEqual(0, c.content.index)
		self.assertEqual(1, b.content.index)
		self.assertEqual(2, a.content.index)
		self.assertEqual("(gen_0 -> gen_1) -> gen_2 -> gen_0", str(typ))

class InstantiateTests(unittest.TestCase):

	def test_substitutes_fresh_holes(self):
		scheme = Scheme(("p", "q"), Arrow(Generalized(1), Arrow(Generalized(0), literal_number)))
		x, y = Hole("x", 0), Hole("y", 0)
		typ = instantiate(scheme, [x, y])
		self.assertIs(y, typ.domain)
		self.assertIs(x, typ.codomain.domain)
		self.assertIs(literal_number, typ.codomain.codomain)

	def test_free_holes_stay_shared(self):
		outer = Hole("outer", 0)
		scheme = Scheme(("p",), Arrow(Generalized(0), outer))
		typ = instantiate(scheme, [Hole("x", 0)])
		self.assertIs(outer, typ.codomain)

	def test_no_sharing_with_the_body(self):
		body = Arrow(Generalized(0), Generalized(0))
		typ = instantiate(Scheme(("p",), body), [Hole("x", 0)])
		self.assertIsNot(body, typ)
		self.assertIsInstance(body.domain, Generalized)

	def test_recurses_through_filled_holes(self):
		frozen = Hole("frozen", 1)
		frozen.fill(Generalized(0))
		x = Hole("x", 0)
		typ = instantiate(Scheme(("p",), Arrow(frozen, frozen)), [x])
		self.assertIs(x, typ.domain)
		self.assertIs(x, typ.codomain)


if __name__ == '__main__':
	unittest.main()
