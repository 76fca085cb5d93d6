#!/usr/bin/env python
"""
Test NumericVector.

This script tests:
- Construction (literal, sequence, zero-filled) and copy semantics
- Elementwise addition and dot product
- Dimension mismatch handling
- Display formatting

Usage:
    python tests/test_vector.py
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
from src.models.dense.vector import NumericVector
from src.models.dense.errors import DimensionMismatch


def test_construction():
    """Test the three ways of building a vector."""
    print("\n" + "=" * 60)
    print("Test 1: Construction")
    print("=" * 60)

    v = NumericVector([1.0, 2.0, 3.0])
    assert v.length() == 3
    assert len(v) == 3
    assert v.tolist() == [1.0, 2.0, 3.0]
    print(f"✓ From literal list: {v}")

    source = np.array([4.0, 5.0])
    w = NumericVector(source)
    source[0] = 100.0
    assert w[0] == 4.0, "Vector must copy its source array"
    print("✓ From numpy array (copied)")

    z = NumericVector.zeros(4)
    assert z.tolist() == [0.0, 0.0, 0.0, 0.0]
    assert NumericVector.zeros(0).length() == 0
    print("✓ Zero-filled")

    try:
        NumericVector([[1.0, 2.0], [3.0, 4.0]])
        assert False, "Should reject 2-D data"
    except ValueError:
        print("✓ 2-D data rejected")

    try:
        NumericVector.zeros(-1)
        assert False, "Should reject negative length"
    except ValueError:
        print("✓ Negative length rejected")

    try:
        NumericVector("12")
        assert False, "Should reject strings"
    except ValueError:
        print("✓ String data rejected")

    print("\n✅ Construction tests passed!")


def test_value_semantics():
    """Vectors never share storage."""
    print("\n" + "=" * 60)
    print("Test 2: Value Semantics")
    print("=" * 60)

    a = NumericVector([1.0, 2.0])
    b = NumericVector(a)
    c = a.copy()
    a[0] = 9.0

    assert b[0] == 1.0
    assert c[0] == 1.0
    assert a == NumericVector([9.0, 2.0])
    assert b == c
    assert a != b
    print("✓ Copies are independent and compare by content")

    arr = a.to_numpy()
    arr[1] = -1.0
    assert a[1] == 2.0
    print("✓ to_numpy returns a copy")

    print("\n✅ Value semantics tests passed!")


def test_element_access():
    """Test indexed reads and writes."""
    print("\n" + "=" * 60)
    print("Test 3: Element Access")
    print("=" * 60)

    v = NumericVector.zeros(3)
    v[1] = 2.5
    assert v.element(1) == 2.5
    assert v[1] == 2.5
    assert isinstance(v[1], float)
    assert list(v) == [0.0, 2.5, 0.0]
    assert len(v) == 3, "Writes must not change the length"
    print("✓ Read/write by index")

    for index in [3, -4]:
        try:
            v[index]
            assert False, f"Index {index} should be out of range"
        except IndexError:
            print(f"✓ Index {index} raises IndexError")

    w = NumericVector([1.0, 2.0, 3.0, 4.0])
    part = w[1:3]
    assert isinstance(part, NumericVector)
    assert part == NumericVector([2.0, 3.0])
    part[0] = 100.0
    assert w[1] == 2.0, "Slices must be copies"
    print("✓ Slices return independent vectors")

    print("\n✅ Element access tests passed!")


def test_add():
    """Test elementwise addition."""
    print("\n" + "=" * 60)
    print("Test 4: Addition")
    print("=" * 60)

    a = NumericVector([1.0, -2.0, 3.5])
    b = NumericVector([0.5, 2.0, -1.0])
    s = a.add(b)

    assert s.length() == a.length()
    for i in range(a.length()):
        assert s[i] == a[i] + b[i]
    assert a + b == s
    print(f"✓ {a} + {b} = {s}")

    assert a == NumericVector([1.0, -2.0, 3.5]), "Operands must not be modified"
    print("✓ Operands unchanged")

    print("\n✅ Addition tests passed!")


def test_dot():
    """Test dot product and its commutativity."""
    print("\n" + "=" * 60)
    print("Test 5: Dot Product")
    print("=" * 60)

    a = NumericVector([1.0, 2.0, 3.0])
    b = NumericVector([4.0, -5.0, 6.0])

    assert a.dot(b) == 1 * 4 + 2 * -5 + 3 * 6
    assert a.dot(b) == b.dot(a)
    assert a @ b == 12.0
    print(f"✓ {a} · {b} = {a.dot(b)}")

    assert NumericVector([]).dot(NumericVector([])) == 0.0
    print("✓ Empty dot product is 0")

    print("\n✅ Dot product tests passed!")


def test_dimension_mismatch():
    """Mismatched lengths fail fast."""
    print("\n" + "=" * 60)
    print("Test 6: Dimension Mismatch")
    print("=" * 60)

    a = NumericVector([1.0, 2.0])
    b = NumericVector([1.0, 2.0, 3.0])

    try:
        a.dot(b)
        assert False, "dot should raise DimensionMismatch"
    except DimensionMismatch as e:
        assert e.expected == 2
        assert e.actual == 3
        assert 'dot' in str(e)
        print(f"✓ dot rejected: {e}")

    try:
        a + b
        assert False, "add should raise DimensionMismatch"
    except DimensionMismatch as e:
        print(f"✓ add rejected: {e}")

    # Same length, wrong shape
    for bad in [[[1.0, 2.0], [3.0, 4.0]], [[3.0], [4.0]]]:
        try:
            a.dot(bad)
            assert False, f"dot should reject {bad}"
        except ValueError as e:
            print(f"✓ dot rejected 2-D operand: {e}")

    try:
        a.add(np.array([[1.0], [2.0]]))
        assert False, "add should reject a column array"
    except ValueError as e:
        assert "(2, 1)" in str(e)
        print(f"✓ add rejected column array: {e}")

    assert a.dot([3.0, 4.0]) == 11.0
    assert a + [1.0, 1.0] == NumericVector([2.0, 3.0])
    print("✓ Plain 1-D sequences accepted as operands")

    assert issubclass(DimensionMismatch, ValueError)
    print("✓ DimensionMismatch is a ValueError")

    print("\n✅ Dimension mismatch tests passed!")


def test_display():
    """Test textual rendering."""
    print("\n" + "=" * 60)
    print("Test 7: Display")
    print("=" * 60)

    assert NumericVector([1.0, 2.5, -3.0]).display() == "(1, 2.5, -3)"
    assert str(NumericVector([0.125])) == "(0.125)"
    assert str(NumericVector([])) == "()"
    assert str(NumericVector([1e-7, 1234567.0])) == "(1e-07, 1.23457e+06)"
    assert repr(NumericVector([1.0, 2.0])) == "NumericVector([1.0, 2.0])"
    print("✓ Rendering matches '(v0, v1, ...)'")

    print("\n✅ Display tests passed!")


def run_all_tests():
    test_construction()
    test_value_semantics()
    test_element_access()
    test_add()
    test_dot()
    test_dimension_mismatch()
    test_display()

    print("\n" + "=" * 70)
    print(" " * 20 + "🎉 ALL TESTS PASSED! 🎉")
    print("=" * 70)


if __name__ == "__main__":
    run_all_tests()
