import io

import pytest

from coursework.cli import main, run_menu, setup_initial
from coursework.school import School
from coursework.storage import load_school


def _reader(lines):
    feed = iter(lines)

    def read_line():
        try:
            return next(feed) + "\n"
        except StopIteration:
            raise EOFError from None

    return read_line


def _menu(school, lines, directory="."):
    out = []
    run_menu(school, _reader(lines), out.append, directory)
    return "".join(out)


@pytest.fixture
def school():
    s = School()
    s.add_subject("Maths", "Smith")
    s.add_student("Ann")
    return s


def test_setup_retries_until_names_given():
    s = School()
    out = []
    setup_initial(s, _reader(["", "Maths", "", "Maths", "Smith", "", "Ann"]), out.append)
    text = "".join(out)
    assert [(x.name, x.teacher) for x in s.subjects] == [("Maths", "Smith")]
    assert [x.name for x in s.students] == ["Ann"]
    assert "Error: Subject name cannot be empty. Try again." in text
    assert "Error: Teacher name cannot be empty. Try again." in text
    assert "Error: Student name cannot be empty. Try again." in text
    assert "✓ Subject 'Maths' added successfully" in text


def test_setup_reads_nothing_when_data_present(school):
    out = []
    setup_initial(school, _reader([]), out.append)
    assert out == []
    assert len(school.subjects) == 1 and len(school.students) == 1


def test_setup_raises_on_end_of_input():
    with pytest.raises(EOFError):
        setup_initial(School(), _reader(["Maths"]), lambda text: None)


def test_add_first_subject():
    s = School()
    text = _menu(s, ["1", "Physics", "Jones", "", "0"])
    assert [x.name for x in s.subjects] == ["Physics"]
    assert "Subject 'Physics' added as first subject" in text
    assert "Exiting program. Goodbye!" in text


def test_duplicate_subject_ignores_case(school):
    text = _menu(school, ["1", "MATHS", "", "0"])
    assert len(school.subjects) == 1
    assert "Error: Subject 'MATHS' already exists in the system" in text


def test_empty_subject_name_rejected():
    s = School()
    text = _menu(s, ["1", "", "", "0"])
    assert s.subjects == []
    assert "Error: Subject name cannot be empty" in text


def test_long_name_is_cut_to_line_limit():
    s = School()
    _menu(s, ["1", "x" * 100, "Jones", "", "0"])
    assert s.subjects[0].name == "x" * 63


def test_add_student_and_duplicate(school):
    text = _menu(school, ["2", "Bob", "", "2", "Bob", "", "0"])
    assert [x.name for x in school.students] == ["Ann", "Bob"]
    assert "Student 'Bob' added successfully" in text
    assert "Error: Student 'Bob' already exists in the system" in text


def test_enroll_grade_and_lookup(school):
    text = _menu(
        school,
        ["3", "1", "1", "", "4", "1", "1", "85", "", "7", "1", "1", "", "0"],
    )
    assert school.grade(1, 1) == 85
    assert "Added subject Maths to student Ann" in text
    assert "Grade 85 added for subject id 1" in text
    assert "Grade: 85" in text


def test_enroll_twice_reports(school):
    text = _menu(school, ["3", "1", "1", "", "3", "1", "1", "", "0"])
    assert len(school.students[0].subjects) == 1
    assert "Student already has subject: Maths" in text


def test_enroll_unknown_student(school):
    text = _menu(school, ["3", "9", "", "0"])
    assert "Error: Student with ID 9 not found" in text
    assert school.students[0].subjects == []


def test_grade_out_of_range_warns_but_records(school):
    school.enroll(1, 1)
    text = _menu(school, ["4", "1", "1", "150", "", "0"])
    assert "Warning: Grade should be between 0 and 100" in text
    assert school.grade(1, 1) == 150


def test_grade_for_missing_subject(school):
    school.add_subject("Art", "Lee")
    school.enroll(1, 1)
    text = _menu(school, ["4", "1", "2", "70", "", "0"])
    assert "Error: Student does not have subject with id 2" in text
    assert school.grade(1, 1) == 0


def test_teachers_and_students_queries(school):
    school.enroll(1, 1)
    text = _menu(school, ["9", "1", "", "10", "Smith", "", "5", "1", "", "0"])
    assert "Ann's teachers \nSmith \n" in text
    assert "Students taught by Smith:\nAnn \n" in text
    assert "Students studying subject ID 1:\nAnn \n" in text


def test_teachers_of_unknown_student(school):
    text = _menu(school, ["9", "7", "", "0"])
    assert "Error: Student with ID 7 not found" in text


def test_leading_number_choice_and_invalid(school):
    text = _menu(school, ["12xyz", "", "99", "", "0"])
    assert "--- All Students ---" in text
    assert "\tAnn\t\t" in text
    assert "Invalid choice. Please try again." in text


def test_empty_lists_reported():
    text = _menu(School(), ["11", "", "12", "", "0"])
    assert "No subjects in the system" in text
    assert "No students in the system" in text


def test_end_of_input_leaves_menu(school):
    text = _menu(school, ["2", "Bob"])
    assert [x.name for x in school.students] == ["Ann", "Bob"]
    assert "Goodbye" not in text


def test_save_option_round_trip(school, tmp_path):
    school.enroll(1, 1)
    school.set_grade(1, 1, 77)
    text = _menu(school, ["13", "", "0"], tmp_path)
    assert "✓ Subjects saved to subjects.txt" in text
    assert "✓ Students saved to students.txt" in text
    loaded = load_school(tmp_path)
    assert [(x.name, x.teacher) for x in loaded.subjects] == [("Maths", "Smith")]
    assert loaded.grade(1, 1) == 77


def test_main_first_run_and_reload(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Maths\nSmith\nAnn\n0\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "No existing data found." in out
    assert "Program terminated." in out
    loaded = load_school(tmp_path)
    assert [x.name for x in loaded.subjects] == ["Maths"]
    assert [x.name for x in loaded.students] == ["Ann"]

    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["-d", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "✓ Loaded subjects from subjects.txt" in out
    assert "✓ Loaded students from students.txt" in out
    assert "No existing data found." not in out


def test_main_without_input_fails(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--directory", str(tmp_path)]) == 1
    assert not (tmp_path / "subjects.txt").exists()