"""
Tests for the demo command line entry point.
"""

import pytest

from demo import main


class TestDemo:
    """Tests for demo.main."""

    def test_prints_tree_summary(self, capsys):
        """Test in-order values, size and depth are printed."""
        assert main(["8", "3", "10", "1", "6", "14", "4", "7", "13", "8"]) == 0

        out = capsys.readouterr().out
        assert "in-order: 1 3 4 6 7 8 10 13 14\n" in out
        assert "size:     9\n" in out
        assert "depth:    3\n" in out
        assert "list:     8 3 10 1 6 14 4 7 13 8\n" in out

    def test_no_values(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "size:     0\n" in out
        assert "depth:    0\n" in out

    def test_rejects_non_integers(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["1", "two"])

        assert exc_info.value.code == 2
