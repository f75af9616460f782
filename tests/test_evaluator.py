import unittest

import pytest

from ringpoly import Complex, Environment, ParseError, Polynomial, UnknownName, evaluate
from ringpoly.evaluator import evaluate_expression


class TestEnvironment(unittest.TestCase):
    def test_define_lookup(self):
        env = Environment()
        env.define('A', Polynomial([1, 2]))
        self.assertIn('A', env)
        self.assertEqual(Polynomial([1, 2]), env.lookup('A'))
        self.assertEqual(['A'], list(env))
        self.assertEqual(1, len(env))

        with self.assertRaises(UnknownName):
            env.lookup('B')
        with self.assertRaises(KeyError):
            env.lookup('B')
        with self.assertRaises(ParseError):
            env.define('not a name', Polynomial.zero())

    def test_sessions_are_independent(self):
        first, second = Environment(), Environment()
        evaluate(first, 'A = (1)X')
        self.assertIn('A', first)
        self.assertNotIn('A', second)

    def test_bad_ring(self):
        with self.assertRaises(ValueError):
            Environment(ring=0)


class TestEvaluate(unittest.TestCase):
    def setUp(self):
        self.env = Environment()
        evaluate(self.env, 'A = (1.23 + 3.45i)X2 + (-2.0 - 1.0i)X + (-1.0 + 0.0i)')
        evaluate(self.env, 'B = (1 - 2i)X3 + (-1 + 0i)')
        evaluate(self.env, 'C = (1)X + (1)')
        evaluate(self.env, 'D = (1)X + (-1)')

    def test_definition(self):
        outcome = evaluate(self.env, 'E = (2)X2 + (1i)')
        self.assertTrue(outcome.is_definition)
        self.assertEqual('E', outcome.name)
        self.assertEqual(Polynomial([Complex(0.0, 1.0), 0, 2]), outcome.value)
        self.assertEqual(outcome.value, self.env.lookup('E'))

    def test_redefinition(self):
        evaluate(self.env, 'C = (5)')
        self.assertEqual(Polynomial([5]), self.env.lookup('C'))

    def test_expression(self):
        outcome = evaluate(self.env, 'C * D')
        self.assertFalse(outcome.is_definition)
        self.assertEqual('(1)X2 + (-1)', str(outcome.value))

    def test_left_to_right(self):
        # No precedence: C + D * C is (C + D) * C = 2x(x + 1).
        self.assertEqual(Polynomial([0, 2, 2]), evaluate(self.env, 'C + D * C').value)
        self.assertEqual(Polynomial([2]), evaluate(self.env, 'C - D').value)
        self.assertEqual(Polynomial.zero(), evaluate(self.env, 'C - C').value)

    def test_single_name(self):
        self.assertEqual(self.env.lookup('B'), evaluate(self.env, '  B ').value)

    def test_errors(self):
        with self.assertRaises(UnknownName):
            evaluate(self.env, 'A + Z')
        with self.assertRaises(ParseError):
            evaluate(self.env, 'A +')
        with self.assertRaises(ParseError):
            evaluate(self.env, 'A / B')
        with self.assertRaises(ParseError):
            evaluate(self.env, '')
        with self.assertRaises(ParseError):
            evaluate(self.env, 'F = X2')
        with self.assertRaises(ParseError):
            evaluate(self.env, 'F = (1) = (2)')


def test_ring_environment():
    env = Environment(ring=3)
    evaluate(env, 'X = (1)X')
    evaluate(env, 'Y = (1)X2')
    assert evaluate(env, 'X * Y').value == Polynomial([1])
    assert evaluate(env, 'Y * Y * Y').value == Polynomial([1])
    assert evaluate(env, 'X - Y').value == Polynomial([0, 1, -1])


def test_unknown_name_message():
    env = Environment()
    with pytest.raises(UnknownName) as info:
        evaluate_expression(env, 'Q')
    assert str(info.value) == 'unknown polynomial: Q'
