"""Tests für die CLI (click CliRunner im temporären Verzeichnis)."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture
def runner(tmp_path: Path, monkeypatch) -> CliRunner:
    """CliRunner mit leerem Arbeitsverzeichnis (keine Config → Defaults)."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def _students_file() -> str:
    return Path("student_records.txt").read_text(encoding="utf-8")


def _courses_file() -> str:
    return Path("course_records.txt").read_text(encoding="utf-8")


# ─── DEMO ─────────────────────────────────────────────────────────────────────

class TestDemo:
    def test_demo_writes_both_files(self, runner: CliRunner):
        """Demo speichert Studierende und Kurse im festen Zeilenformat."""
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0, result.output
        assert _students_file() == (
            "5001|Alice Smith|1001|101\n"
            "5002|Bob Johnson|1002|101\n"
        )
        assert _courses_file() == (
            "101|Advanced Mathematics|40|1\n"
            "201|Data Structures & Algos|30|30\n"
        )

    def test_demo_output(self, runner: CliRunner):
        result = runner.invoke(cli, ["demo"])
        assert "Code: 201" in result.output
        assert "Gefunden für ID 5001" in result.output
        assert "Dr. Chen unterrichtet: Advanced Mathematics" in result.output


# ─── ANLEGEN & EINSCHREIBEN ───────────────────────────────────────────────────

class TestCommands:
    def test_add_course_and_student(self, runner: CliRunner):
        assert runner.invoke(cli, ["add-course", "101", "Mathe", "--capacity", "1"]).exit_code == 0
        assert runner.invoke(cli, ["add-student", "5001", "Alice"]).exit_code == 0
        assert runner.invoke(cli, ["add-student", "5002", "Bob"]).exit_code == 0
        assert _courses_file() == "101|Mathe|1|0\n"
        assert _students_file() == "5001|Alice|1001|\n5002|Bob|1002|\n"

    def test_roll_continues_after_explicit(self, runner: CliRunner):
        """Roll-Nummer aus der Datei hebt den Zähler für neue Aufnahmen."""
        runner.invoke(cli, ["add-student", "1", "A", "--roll", "1500"])
        runner.invoke(cli, ["add-student", "2", "B"])
        assert _students_file() == "1|A|1500|\n2|B|1501|\n"

    def test_duplicate_student_rejected(self, runner: CliRunner):
        runner.invoke(cli, ["add-student", "5001", "Alice"])
        result = runner.invoke(cli, ["add-student", "5001", "Alice"])
        assert result.exit_code == 1

    def test_enroll_until_full(self, runner: CliRunner):
        runner.invoke(cli, ["add-course", "101", "Mathe", "--capacity", "1"])
        runner.invoke(cli, ["add-student", "5001", "Alice"])
        runner.invoke(cli, ["add-student", "5002", "Bob"])

        assert runner.invoke(cli, ["enroll", "5001", "101"]).exit_code == 0
        full = runner.invoke(cli, ["enroll", "5002", "101"])
        assert full.exit_code == 1
        assert "voll" in full.output
        assert _courses_file() == "101|Mathe|1|1\n"
        assert _students_file() == "5001|Alice|1001|101\n5002|Bob|1002|\n"

    def test_enroll_unknown_ids(self, runner: CliRunner):
        result = runner.invoke(cli, ["enroll", "1", "2"])
        assert result.exit_code == 1
        assert "nicht gefunden" in result.output

    def test_find(self, runner: CliRunner):
        runner.invoke(cli, ["add-student", "5001", "Alice"])
        found = runner.invoke(cli, ["find", "5001"])
        assert found.exit_code == 0
        assert "Alice" in found.output
        assert runner.invoke(cli, ["find", "42"]).exit_code == 1

    def test_students_skips_corrupt_line(self, runner: CliRunner):
        Path("student_records.txt").write_text(
            "5001|Alice|1001|\nabc|Bob|1002|\n", encoding="utf-8"
        )
        result = runner.invoke(cli, ["students"])
        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "1 Studierende" in result.output

    def test_markup_characters_in_names(self, runner: CliRunner):
        """Namen und Titel mit eckigen Klammern brechen die Anzeige nicht."""
        runner.invoke(cli, ["add-student", "5001", "Ann [/]"])
        runner.invoke(cli, ["add-course", "101", "C [/x]"])
        students = runner.invoke(cli, ["students"])
        assert students.exit_code == 0, students.output
        assert "Ann [/]" in students.output
        courses = runner.invoke(cli, ["courses"])
        assert courses.exit_code == 0, courses.output
        assert "C [/x]" in courses.output
        assert runner.invoke(cli, ["find", "5001"]).exit_code == 0

    def test_unreadable_records_file(self, runner: CliRunner):
        Path("student_records.txt").mkdir()
        result = runner.invoke(cli, ["students"])
        assert result.exit_code == 1
        assert "Laden fehlgeschlagen" in result.output

    def test_courses_empty(self, runner: CliRunner):
        result = runner.invoke(cli, ["courses"])
        assert result.exit_code == 0
        assert "Keine Kurse" in result.output


# ─── CONFIG ───────────────────────────────────────────────────────────────────

class TestConfigCommands:
    def test_config_init_and_show(self, runner: CliRunner):
        assert runner.invoke(cli, ["config", "init"]).exit_code == 0
        assert Path("config/records_config.yaml").exists()
        shown = runner.invoke(cli, ["config", "show"])
        assert shown.exit_code == 0
        assert "student_records.txt" in shown.output

    def test_data_dir_from_config(self, runner: CliRunner):
        Path("config").mkdir()
        Path("daten").mkdir()
        Path("config/records_config.yaml").write_text(
            "storage:\n  data_dir: daten\n", encoding="utf-8"
        )
        assert runner.invoke(cli, ["add-course", "7", "Logik"]).exit_code == 0
        assert Path("daten/course_records.txt").read_text(encoding="utf-8") == (
            "7|Logik|30|0\n"
        )
