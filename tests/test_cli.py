from refi_calc.cli import build_parser, inputs_from_args, main


class TestCli:
    def test_default_report(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "$3,160.34" in out
        assert "Breakeven:            10.5 months" in out

    def test_display_style_arguments(self, canonical_inputs):
        args = build_parser().parse_args([
            "--loan", "500,000", "--rate", "6.5%", "--new-rate", "5", "--cost", "1%", "--down", "100,000",
        ])
        assert inputs_from_args(args) == canonical_inputs

    def test_no_savings(self, capsys):
        assert main(["--new-rate", "8"]) == 0
        assert "N/A" in capsys.readouterr().out

    def test_zero_term(self, capsys):
        assert main(["--term", "0"]) == 1
        assert "greater than 0" in capsys.readouterr().err
