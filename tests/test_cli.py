from src.cli import main


class TestProjectCommand:
    def test_writes_export(self, tmp_path, capsys):
        out = tmp_path / "projection.csv"
        assert main(["project", "--years", "5", "--out", str(out)]) == 0

        lines = out.read_text().splitlines()
        assert lines[0] == "Year,Income,Growth,Bills,Interest,Loan Balance,Cashback,Cash Value,Net Equity"
        assert len(lines) == 6
        report = capsys.readouterr().out
        assert "Key Points" in report
        assert "Contributing $45,000 annually" in report

    def test_currency_arguments(self, tmp_path):
        out = tmp_path / "projection.csv"
        assert main(["project", "--premium", "$24,000", "--bills", "1,000", "--years", "1",
                     "--out", str(out)]) == 0
        assert out.read_text().splitlines()[1] == "1,24000,0,12000,0,12000,240,24000,12000"

    def test_calendar(self, capsys):
        assert main(["project", "--years", "1", "--calendar", "--no-export"]) == 0
        assert "Monthly Payment Schedule" in capsys.readouterr().out

    def test_invalid_config(self, capsys):
        assert main(["project", "--premium", "0", "--no-export"]) == 1
        assert "annual_contribution" in capsys.readouterr().err


class TestLedgerCommand:
    def test_summary_and_export(self, tmp_path, capsys, single_row_ledger):
        src = tmp_path / "ledger.txt"
        src.write_text(single_row_ledger + "\n")
        out = tmp_path / "policy_details.csv"

        assert main(["ledger", str(src), "--out", str(out)]) == 0
        assert "$10,000.00" in capsys.readouterr().out
        assert len(out.read_text().splitlines()) == 2

    def test_no_data(self, tmp_path, capsys):
        src = tmp_path / "ledger.txt"
        src.write_text("Year Age Premium\n")
        assert main(["ledger", str(src), "--no-export"]) == 1
        assert "No valid data rows found" in capsys.readouterr().err
