"""Interactive menu for the school register."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from coursework.school import (
    School,
    SchoolError,
    format_student_grades,
    format_students,
    format_subject,
    format_subjects,
)
from coursework.storage import (
    STUDENTS_FILE,
    SUBJECTS_FILE,
    load_school,
    save_students,
    save_subjects,
)

_LINE_LIMIT = 63
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "\n"
    "========================================\n"
    "       SCHOOL MANAGEMENT SYSTEM         \n"
    "========================================\n"
    "1) Add subject with teacher\n"
    "2) Add student\n"
    "3) Add subject to student\n"
    "4) Add grade to student per subject\n"
    "5) Find students studying a subject\n"
    "6) Find teacher teaching a subject\n"
    "7) Find grades for a student in a subject\n"
    "8) Print student with subjects and grades\n"
    "9) Find teachers teaching a student\n"
    "10) Find students taught by a teacher\n"
    "11) Print all subjects\n"
    "12) Print all students\n"
    "13) Save data to files\n"
    "0) Exit\n"
    "========================================\n"
    "Enter your choice: "
)

ReadLine = Callable[[], str]
Write = Callable[[str], object]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class _Console:
    read_line: ReadLine
    write: Write

    def ask(self, prompt: str) -> str:
        """Prompt and return one line without its newline, cut to the line limit."""
        self.write(prompt)
        return self.read_line()[:_LINE_LIMIT].split("\n", 1)[0]

    def ask_int(self, prompt: str) -> int:
        self.write(prompt)
        return _atoi(self.read_line()[:_LINE_LIMIT])


# -- initial setup --------------------------------------------------------


def setup_initial(school: School, read_line: ReadLine, write: Write) -> None:
    """Ask for a first subject and a first student when the register lacks them."""
    console = _Console(read_line, write)
    if not school.subjects:
        write("No existing data found. Setting up initial data...\n")
        write("Please add at least one subject to start.\n\n")
        while True:
            name = console.ask("Enter first subject name: ")
            if not name:
                write("Error: Subject name cannot be empty. Try again.\n")
                continue
            teacher = console.ask("Enter teacher name: ")
            if not teacher:
                write("Error: Teacher name cannot be empty. Try again.\n")
                continue
            break
        school.add_subject(name, teacher)
        write(f"✓ Subject '{name}' added successfully\n\n")

    if not school.students:
        while True:
            name = console.ask("Enter first student name: ")
            if name:
                break
            write("Error: Student name cannot be empty. Try again.\n")
        school.add_student(name)
        write(f"✓ Student '{name}' added successfully\n\n")


# -- menu actions ---------------------------------------------------------


def _add_subject(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    write("\n--- Add New Subject ---\n")
    name = console.ask("Enter subject name: ")
    if not name:
        write("Error: Subject name cannot be empty\n")
        return
    if school.subject_by_name(name) is not None:
        write(
            f"Error: Subject '{name}' already exists in the system, "
            "enter another subject \n"
        )
        return
    teacher = console.ask("Enter teacher name: ")
    if not teacher:
        write("Error: Teacher name cannot be empty\n")
        return
    first = not school.subjects
    school.add_subject(name, teacher)
    if first:
        write(f"Subject '{name}' added as first subject\n")


def _add_student(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    write("\n--- Add New Student ---\n")
    name = console.ask("Enter student name: ")
    if not name:
        write("Error: Student name cannot be empty\n")
        return
    if school.student_by_name(name) is not None:
        write(f"Error: Student '{name}' already exists in the system\n")
        return
    first = not school.students
    school.add_student(name)
    if first:
        write(f"Student '{name}' added as first student\n")
    else:
        write(f"Student '{name}' added successfully\n")


def _pick_student(school: School, console: _Console):
    console.write("\nAvailable students:\n")
    console.write(format_students(school.students))
    student_id = console.ask_int("Enter student ID: ")
    student = school.student_by_id(student_id)
    if student is None:
        console.write(f"Error: Student with ID {student_id} not found\n")
    return student


def _enroll(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system. Add students first.\n")
        return
    if not school.subjects:
        write("Error: No subjects in the system. Add subjects first.\n")
        return
    write("\n--- Add Subject to Student ---\n")
    student = _pick_student(school, console)
    if student is None:
        return
    write("\nAvailable subjects:\n")
    write(format_subjects(school.subjects))
    subject_id = console.ask_int("Enter subject ID: ")
    subject = school.subject_by_id(subject_id)
    if subject is None:
        write(f"Error: Subject with ID {subject_id} not found\n")
        return
    try:
        school.enroll(student.student_id, subject_id)
    except SchoolError as exc:
        write(f"{exc}\n")
        return
    write(f"Added subject {subject.name} to student {student.name}\n")


def _add_grade(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system\n")
        return
    write("\n--- Add Grade to Student ---\n")
    student = _pick_student(school, console)
    if student is None:
        return
    if not student.subjects:
        write("Error: Student has no subjects assigned\n")
        return
    write("\nStudent's subjects:\n")
    write("Subject ID\tSubject Name\n")
    for subject in student.subjects:
        write(f"{subject.subject_id}\t\t{subject.name}\n")
    subject_id = console.ask_int("Enter subject ID: ")
    grade = console.ask_int("Enter grade (0-100): ")
    if not 0 <= grade <= 100:
        write("Warning: Grade should be between 0 and 100\n")
    try:
        school.set_grade(student.student_id, subject_id, grade)
    except SchoolError as exc:
        write(f"Error: {exc}\n")
        return
    write(f"Grade {grade} added for subject id {subject_id}\n")


def _students_by_subject(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system\n")
        return
    write("\n--- Find Students by Subject ---\n")
    subject_id = console.ask_int("Enter subject ID: ")
    write(f"\nStudents studying subject ID {subject_id}:\n")
    for student in school.students_by_subject(subject_id):
        write(f"{student.name} \n")


def _teacher_by_subject(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.subjects:
        write("Error: No subjects in the system\n")
        return
    write("\n--- Find Teacher by Subject ---\n")
    write("\nAvailable subjects:\n")
    write(format_subjects(school.subjects))
    subject_id = console.ask_int("Enter subject ID: ")
    write(f"\nTeacher for subject ID {subject_id}:\n")
    subject = school.subject_by_id(subject_id)
    if subject is None:
        write(f"Error: Subject with ID {subject_id} not found\n")
        return
    write(format_subject(subject))


def _find_grade(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system\n")
        return
    write("\n--- Find Student Grades ---\n")
    student = _pick_student(school, console)
    if student is None:
        return
    subject_id = console.ask_int("Enter subject ID: ")
    try:
        grade = school.grade(student.student_id, subject_id)
    except SchoolError as exc:
        write(f"Error: {exc}\n")
        return
    write(f"Grade: {grade}\n")


def _student_grades(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system\n")
        return
    write("\n--- Find Student Grades ---\n")
    student = _pick_student(school, console)
    if student is not None:
        write(format_student_grades(student))


def _teachers_of_student(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system\n")
        return
    write("\n--- Find Teachers by Student ---\n")
    write("\nAvailable students:\n")
    write(format_students(school.students))
    student_id = console.ask_int("Enter student ID: ")
    write(f"\nTeachers teaching student ID {student_id}:\n")
    student = school.student_by_id(student_id)
    if student is None:
        write(f"Error: Student with ID {student_id} not found\n")
        return
    teachers = school.teachers_of_student(student_id)
    if not teachers:
        write(f"No teachers were assigned to {student.name} \n")
        return
    write(f"{student.name}'s teachers \n")
    for teacher in teachers:
        write(f"{teacher} \n")


def _students_by_teacher(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    if not school.students:
        write("Error: No students in the system\n")
        return
    write("\n--- Find Students by Teacher ---\n")
    teacher = console.ask("Enter teacher name: ")
    if not teacher:
        write("Error: Teacher name cannot be empty\n")
        return
    write(f"\nStudents taught by {teacher}:\n")
    for student in school.students_by_teacher(teacher):
        write(f"{student.name} \n")


def _all_subjects(school: School, console: _Console, directory: Path) -> None:
    console.write("\n--- All Subjects ---\n")
    if school.subjects:
        console.write(format_subjects(school.subjects))
    else:
        console.write("No subjects in the system\n")


def _all_students(school: School, console: _Console, directory: Path) -> None:
    console.write("\n--- All Students ---\n")
    if school.students:
        console.write(format_students(school.students))
    else:
        console.write("No students in the system\n")


def _save_all(school: School, console: _Console, directory: Path) -> None:
    write = console.write
    write("\nSaving data to files...\n")
    jobs = (
        ("Subjects", save_subjects, school.subjects, SUBJECTS_FILE),
        ("Students", save_students, school.students, STUDENTS_FILE),
    )
    for label, saver, items, filename in jobs:
        path = Path(directory) / filename
        try:
            saver(items, path)
        except OSError:
            write(f"Error: Could not open file '{path}' for writing\n")
            write(f"✗ Failed to save {label.lower()}\n")
        else:
            write(f"✓ {label} saved to {filename}\n")


_ACTIONS = {
    1: _add_subject,
    2: _add_student,
    3: _enroll,
    4: _add_grade,
    5: _students_by_subject,
    6: _teacher_by_subject,
    7: _find_grade,
    8: _student_grades,
    9: _teachers_of_student,
    10: _students_by_teacher,
    11: _all_subjects,
    12: _all_students,
    13: _save_all,
}


def run_menu(
    school: School, read_line: ReadLine, write: Write, directory: str | Path = "."
) -> None:
    """Show the menu and carry out choices until exit or end of input."""
    console = _Console(read_line, write)
    directory = Path(directory)
    try:
        while True:
            write(_MENU)
            choice = console.ask_int("")
            if choice == 0:
                write("\nExiting program. Goodbye!\n")
                return
            action = _ACTIONS.get(choice)
            if action is None:
                write("\nInvalid choice. Please try again.\n")
            else:
                action(school, console, directory)
            write("\nPress Enter to continue...")
            read_line()
    except EOFError:
        return


# -- program entry --------------------------------------------------------


def _stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _load(directory: Path, write: Write) -> School:
    write("Loading data from files...\n")
    school = load_school(directory)
    if not (directory / SUBJECTS_FILE).exists():
        write(
            f"Info: File '{directory / SUBJECTS_FILE}' not found. "
            "Starting with empty subject list.\n"
        )
    if school.subjects:
        write(f"✓ Loaded subjects from {SUBJECTS_FILE}\n")
    if not (directory / STUDENTS_FILE).exists():
        write(
            f"Info: File '{directory / STUDENTS_FILE}' not found. "
            "Starting with empty student list.\n"
        )
    if school.students:
        write(f"✓ Loaded students from {STUDENTS_FILE}\n")
    write("\n")
    return school


def main(argv: list[str] | None = None) -> int:
    """Run the school register: load, set up, menu, save."""
    parser = argparse.ArgumentParser(
        prog="coursework", description="School management system."
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory holding subjects.txt and students.txt",
    )
    args = parser.parse_args(argv)
    directory = Path(args.directory)
    write = _stdout_write

    write("========================================\n")
    write("   SCHOOL MANAGEMENT SYSTEM - STARTUP   \n")
    write("========================================\n")
    write("\n")

    school = _load(directory, write)
    try:
        setup_initial(school, _stdin_line, write)
    except EOFError:
        write("\nError: No input available. Exiting.\n")
        return 1

    write("Initial setup complete!\n")
    write("Starting main menu...\n")
    run_menu(school, _stdin_line, write, directory)
    _save_all(school, _Console(_stdin_line, write), directory)
    write("\nProgram terminated.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())