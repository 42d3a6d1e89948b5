"""
Tests for the command-line entry point.
"""

from main import build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.initial is None
        assert args.goal == "1,2,3,4,5,6,7,8,0"
        assert args.heuristic == "both"
        assert args.verbose is False

    def test_custom_problem(self):
        args = build_parser().parse_args(
            ["--initial", "013425786", "--heuristic", "Hamming"]
        )
        assert args.initial == "013425786"
        assert args.heuristic == "Hamming"


class TestMain:
    def test_solves_custom_problem(self, capsys):
        code = main(["--initial", "0,1,3,4,2,5,7,8,6", "--heuristic", "Manhattan"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Solving using Manhattan distance..." in out
        assert "Expanded 4 nodes." in out
        assert "Generated 10 nodes." in out
        assert "Solution is ['Right', 'Down', 'Right']" in out

    def test_both_heuristics(self, capsys):
        code = main(["--initial", "123745680", "--goal", "123864750"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.count("Solution is") == 2
        assert "Expanded 18 nodes." in out

    def test_invalid_board(self, capsys):
        assert main(["--initial", "1,2,3"]) == 2
