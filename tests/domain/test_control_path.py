import unittest

from src.optarith.domain.utils._control_path import create_path_builder


class _Boom(Exception):
    def __init__(self, method, state):
        super().__init__(f"{method.__name__}:{state}")
        self.state = state


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self):
        self.decorator = create_path_builder(lambda x: type(x).__name__)

        class Greeter:
            def greet(self, x):
                """Say hello."""
                return "base"

        self.Greeter = Greeter

    def test_dispatches_on_argument_state(self):
        G = self.Greeter

        @self.decorator(G, G.greet, "int")
        def greet_int(x):
            return f"int {x}"

        @self.decorator(G, G.greet, "str")
        def greet_str(x):
            return f"str {x}"

        g = G()
        self.assertEqual(g.greet(3), "int 3")
        self.assertEqual(g.greet("a"), "str a")

    def test_decorator_returns_sub_method_unchanged(self):
        G = self.Greeter

        def greet_int(x):
            return x

        out = self.decorator(G, G.greet, "int")(greet_int)
        self.assertIs(out, greet_int)

    def test_wrapper_keeps_base_metadata(self):
        G = self.Greeter
        self.decorator(G, G.greet, "int")(lambda x: x)
        self.assertEqual(G.greet.__name__, "greet")
        self.assertEqual(G.greet.__doc__, "Say hello.")

    def test_missing_path_raises_not_implemented_by_default(self):
        G = self.Greeter
        self.decorator(G, G.greet, "int")(lambda x: x)
        with self.assertRaises(NotImplementedError):
            G().greet(1.5)

    def test_missing_path_uses_trap_factory(self):
        G = self.Greeter
        self.decorator(G, G.greet, "int", _Boom)(lambda x: x)
        with self.assertRaises(_Boom) as cm:
            G().greet(1.5)
        self.assertEqual(cm.exception.state, "float")

    def test_unhashable_state_rejected(self):
        G = self.Greeter
        with self.assertRaises(TypeError):
            self.decorator(G, G.greet, ["int"])

    def test_builders_do_not_share_registrations(self):
        G = self.Greeter
        other = create_path_builder(lambda x: type(x).__name__)
        self.decorator(G, G.greet, "int")(lambda x: "first")
        other(G, G.greet, "str")(lambda x: "second")
        # the last installed wrapper belongs to `other`, which has no int path
        with self.assertRaises(NotImplementedError):
            G().greet(1)
        self.assertEqual(G().greet("x"), "second")


if __name__ == "__main__":
    unittest.main()
