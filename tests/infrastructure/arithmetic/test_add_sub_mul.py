from unittest import TestCase
import unittest
import operator

import numpy as np

from src.optarith.domain._errors import (
    ShapeCombinationNotSupportedError,
    ShapeMismatchError,
)
from src.optarith.domain._numeric import NumericKind
from src.optarith.infrastructure._complex import Complex
from src.optarith.infrastructure.arithmetic import ElementwiseArithmetic

OPS = (
    ("add", operator.add),
    ("sub", operator.sub),
    ("mul", operator.mul),
)


class TestAddSubMulLaws(TestCase):
    def setUp(self):
        self.arith = ElementwiseArithmetic()

    def test_vector_scalar_and_scalar_vector(self):
        v = [5, 7, 11]
        for name, fn in OPS:
            with self.subTest(op=name):
                method = getattr(self.arith, name)
                self.assertEqual(method(v, 3), [fn(x, 3) for x in v])
                self.assertEqual(method(3, v), [fn(3, x) for x in v])

    def test_vector_vector(self):
        a, b = [1.5, -2.0, 4.0], [0.5, 3.0, -1.0]
        for name, fn in OPS:
            with self.subTest(op=name):
                res = getattr(self.arith, name)(a, b)
                self.assertEqual(res, [fn(x, y) for x, y in zip(a, b)])

    def test_matrix_matrix(self):
        a = [[1, 2, 3], [4, 5, 6]]
        b = [[6, 5, 4], [3, 2, 1]]
        for name, fn in OPS:
            with self.subTest(op=name):
                res = getattr(self.arith, name)(a, b)
                expected = [[fn(x, y) for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]
                self.assertEqual(res, expected)

    def test_every_real_kind(self):
        for kind in NumericKind:
            t = np.dtype(kind.dtype_name).type
            a = [t(6), t(9)]
            b = [t(3), t(2)]
            for name, fn in OPS:
                with self.subTest(kind=kind, op=name):
                    res = getattr(self.arith, name)(a, b)
                    expected = [fn(x, y) for x, y in zip(a, b)]
                    np.testing.assert_array_equal(np.asarray(res), np.asarray(expected))

    def test_complex_elements(self):
        a = [Complex(np.int32(1), np.int32(2)), Complex(np.int32(3), np.int32(4))]
        b = [Complex(np.int32(5), np.int32(6)), Complex(np.int32(7), np.int32(8))]
        for name, fn in OPS:
            with self.subTest(op=name):
                res = getattr(self.arith, name)(a, b)
                expected = [fn(complex(x), complex(y)) for x, y in zip(a, b)]
                np.testing.assert_allclose([complex(z) for z in res], expected)

    def test_shape_failures_shared_with_division(self):
        for name, _ in OPS:
            method = getattr(self.arith, name)
            with self.subTest(op=name):
                with self.assertRaises(ShapeMismatchError) as cm:
                    method([1, 4], [41, 38, 34])
                self.assertEqual(cm.exception.op, name)
                with self.assertRaises(ShapeMismatchError):
                    method([], [1])
                with self.assertRaises(ShapeMismatchError):
                    method([[1, 4, 8], [2, 9]], [[41, 38, 34], [40, 37, 33]])
                with self.assertRaises(ShapeCombinationNotSupportedError):
                    method([[1]], 2)


if __name__ == "__main__":
    unittest.main()
