"""
Unit tests for the demo programs.

Exercises the scenarios the demos were written for: a division by zero
wrapped by the operation that attempted it, and a two-level chain.
"""

import re
from unittest.mock import patch

import pytest

from feedback.demos import division_by_zero, traceback_test
from feedback.services.propagation import Propagator, set_propagator
from feedback.services.traversal import traverse


@pytest.fixture(autouse=True)
def fresh_propagator():
    """Install a fresh global propagator for each test."""
    set_propagator(Propagator())
    yield
    set_propagator(None)


class TestDivisionByZero:
    """Test the arithmetic demo."""
    
    def test_divide_by_zero_is_root(self):
        """Test that the leaf failure has no cause."""
        outcome, result = division_by_zero.divide(1, 0)
        
        assert outcome.failed
        assert result is None
        assert outcome.error.description == "I can't divide by zero!"
        assert outcome.error.location.file == "division_by_zero.py"
        assert outcome.error.location.function == "divide"
        assert outcome.error.is_root
    
    def test_divide_succeeds(self):
        """Test a valid division."""
        outcome, result = division_by_zero.divide(6, 3)
        
        assert outcome.ok
        assert result == 2
    
    def test_complex_operation_wraps_division(self):
        """Test that the division failure is explained by the caller."""
        outcome, result = division_by_zero.complex_operation(1, 2, 0)
        
        frames = list(traverse(outcome))
        
        assert result is None
        assert len(frames) == 2
        assert frames[0].depth == 0
        assert frames[0].record.description == "An error happened while dividing."
        assert frames[0].record.location.function == "complex_operation"
        assert frames[1].depth == 1
        assert frames[1].record.description == "I can't divide by zero!"
        assert frames[1].record.is_root
    
    def test_successful_addition_not_in_traceback(self):
        """Test that the successful addition leaves no record."""
        outcome, _ = division_by_zero.complex_operation(1, 2, 0)
        
        descriptions = [record.description for record in traverse(outcome).records()]
        
        assert "An error happened while adding." not in descriptions
    
    def test_complex_operation_succeeds(self):
        """Test the nominal path."""
        outcome, result = division_by_zero.complex_operation(4, 2, 3)
        
        assert outcome.ok
        assert result == 2
    
    def test_main_prints_traceback(self, capsys):
        """Test demo output."""
        with patch.object(division_by_zero, "setup_logging"):
            assert division_by_zero.main() == 0
        
        lines = capsys.readouterr().out.splitlines()
        
        assert lines[0] == "Traceback:"
        assert re.match(
            r"^    \(0\) ERROR \(id:0x[0-9a-f]+\) - division_by_zero\.py:\d+ - An error happened while dividing\.$",
            lines[1]
        )
        assert re.match(
            r"^    \(1\) ERROR \(id:0x[0-9a-f]+\) - division_by_zero\.py:\d+ - I can't divide by zero!$",
            lines[2]
        )


class TestTracebackTest:
    """Test the two-level demo."""
    
    def test_function_b_wraps_function_a(self):
        """Test chain order."""
        outcome = traceback_test.function_b()
        
        records = traverse(outcome).records()
        
        assert [record.description for record in records] == ["Error B.", "Error A."]
        assert records[0].location.function == "function_b"
        assert records[1].location.function == "function_a"
    
    def test_main_prints_traceback(self, capsys):
        """Test demo output."""
        with patch.object(traceback_test, "setup_logging"):
            assert traceback_test.main() == 0
        
        out = capsys.readouterr().out
        
        assert out.startswith("Traceback:\n")
        assert "(0) ERROR" in out and "- Error B." in out
        assert "(1) ERROR" in out and "- Error A." in out
