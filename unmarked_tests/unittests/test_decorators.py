"""Unit tests for decorators module"""

from unmarked_tests.decorators import scan_decorators


class TestScanDecorators:
    """Test cases for scan_decorators function"""

    def test_scan_decorators_stacked(self):
        """Test all decorators of a stacked block are collected"""
        lines = ["@pytest.mark.unit", "@pytest.mark.slow", "def test_function():"]
        assert scan_decorators(lines=lines, start_index=2) == {"unit", "slow"}

    def test_scan_decorators_skips_blank_lines(self):
        """Test blank lines between decorators don't end the block"""
        lines = ["@pytest.mark.unit", "", "   ", "@slow", "", "def test_function():"]
        assert scan_decorators(lines=lines, start_index=5) == {"unit", "slow"}

    def test_scan_decorators_stops_at_code(self):
        """Test the block ends at the first ordinary code line"""
        lines = ["@pytest.mark.slow", "value = 1", "@pytest.mark.unit", "def test_function():"]
        assert scan_decorators(lines=lines, start_index=3) == {"unit"}

    def test_scan_decorators_no_decorators(self):
        """Test a definition without decorators gives an empty set"""
        lines = ["import pytest", "", "def test_function():"]
        assert scan_decorators(lines=lines, start_index=2) == set()

    def test_scan_decorators_start_of_file(self):
        """Test scanning from the first line gives an empty set"""
        assert scan_decorators(lines=["def test_function():"], start_index=0) == set()

    def test_scan_decorators_multiline_call(self):
        """Test a multi-line decorator call is scanned as a single decorator"""
        lines = [
            "import pytest",
            "",
            "@pytest.mark.unit",
            "@pytest.mark.parametrize(",
            '    "arg1, arg2",',
            "    [",
            '        pytest.param("a", "b"),',
            '        pytest.param("c", "d"),',
            "    ],",
            ")",
            "def test_with_multiline_decorator(arg1, arg2):",
        ]
        assert scan_decorators(lines=lines, start_index=10) == {"unit", "parametrize"}

    def test_scan_decorators_ignores_identifiers_in_arguments(self):
        """Test identifiers inside a decorator argument list are not taken as markers"""
        lines = [
            "@pytest.mark.parametrize(",
            '    "value",',
            "    [pytest.param(1, marks=pytest.mark.unit)],",
            ")",
            "def test_function(value):",
        ]
        assert scan_decorators(lines=lines, start_index=4) == {"parametrize"}

    def test_scan_decorators_multiline_dict_argument(self):
        """Test curly brace continuation lines don't end the block"""
        lines = [
            "@pytest.mark.slow",
            "@pytest.mark.parametrize(",
            '    "config", [{',
            '        "key": "value",',
            "    }],",
            ")",
            "def test_function(config):",
        ]
        assert scan_decorators(lines=lines, start_index=6) == {"slow", "parametrize"}

    def test_scan_decorators_unbalanced_code_is_continued(self):
        """Test a stray closing delimiter keeps the scan going until depths are back at zero"""
        lines = [
            "@pytest.mark.unit",
            "value = call(",
            "    1)",
            "def test_function():",
        ]
        # "1)" leaves depth at -1, "value = call(" brings it back to zero and ends the block
        assert scan_decorators(lines=lines, start_index=3) == set()

    def test_scan_decorators_only_looks_before_start(self):
        """Test lines after the start index are not scanned"""
        lines = ["def test_function():", "    pass", "@pytest.mark.unit", "def test_other():"]
        assert scan_decorators(lines=lines, start_index=0) == set()
