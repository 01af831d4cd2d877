"""Subjects, students, enrolments and grades for a small school register."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

_MAX_NAME = 255


class SchoolError(Exception):
    """Raised when a school operation cannot be carried out."""


@dataclass
class Subject:
    """A subject taught by one teacher; ``grade`` is used for a student's copy."""

    subject_id: int
    name: str
    teacher: str
    grade: int = 0


@dataclass
class Student:
    """A student and the subjects they study, most recently enrolled first."""

    student_id: int
    name: str
    subjects: list[Subject] = field(default_factory=list)

    def has_subject(self, subject_id: int) -> bool:
        """Return True if the student is enrolled in the given subject."""
        return any(s.subject_id == subject_id for s in self.subjects)

    def _subject(self, subject_id: int) -> Subject | None:
        if subject_id <= 0:
            return None
        return next((s for s in self.subjects if s.subject_id == subject_id), None)


class School:
    """The register of subjects and students, with id generation."""

    def __init__(self) -> None:
        self.subjects: list[Subject] = []
        self.students: list[Student] = []
        self._last_subject_id = 0
        self._last_student_id = 0

    # -- creation -------------------------------------------------------

    def add_subject(self, name: str, teacher: str) -> Subject:
        """Create a subject with a fresh id; names are unique ignoring case."""
        if not name:
            raise SchoolError("Subject name cannot be empty")
        if not teacher:
            raise SchoolError("Teacher name cannot be empty")
        if self.subject_by_name(name) is not None:
            raise SchoolError(f"Subject '{name}' already exists in the system")
        self._last_subject_id += 1
        subject = Subject(self._last_subject_id, name, teacher)
        self.subjects.append(subject)
        return subject

    def add_student(self, name: str) -> Student:
        """Create a student with a fresh id; names are unique (case-sensitive)."""
        if not name:
            raise SchoolError("Student name cannot be empty")
        if self.student_by_name(name) is not None:
            raise SchoolError(f"Student '{name}' already exists in the system")
        self._last_student_id += 1
        student = Student(self._last_student_id, name)
        self.students.append(student)
        return student

    def insert_subject(self, subject: Subject) -> None:
        """Append an existing subject, keeping the id counter at the largest id."""
        self.subjects.append(subject)
        self._last_subject_id = max(self._last_subject_id, subject.subject_id)

    def insert_student(self, student: Student) -> None:
        """Append an existing student, keeping the id counter at the largest id."""
        self.students.append(student)
        self._last_student_id = max(self._last_student_id, student.student_id)

    # -- lookups --------------------------------------------------------

    def subject_by_id(self, subject_id: int) -> Subject | None:
        if subject_id <= 0:
            return None
        return next((s for s in self.subjects if s.subject_id == subject_id), None)

    def subject_by_name(self, name: str) -> Subject | None:
        if not name:
            return None
        wanted = name.casefold()
        return next((s for s in self.subjects if s.name.casefold() == wanted), None)

    def subject_by_teacher(self, teacher: str) -> Subject | None:
        if not teacher:
            return None
        wanted = teacher.casefold()
        return next((s for s in self.subjects if s.teacher.casefold() == wanted), None)

    def student_by_id(self, student_id: int) -> Student | None:
        return next((s for s in self.students if s.student_id == student_id), None)

    def student_by_name(self, name: str) -> Student | None:
        return next((s for s in self.students if s.name == name), None)

    def _require_student(self, student_id: int) -> Student:
        student = self.student_by_id(student_id)
        if student is None:
            raise SchoolError(f"Student with ID {student_id} not found")
        return student

    # -- enrolment and grades -------------------------------------------

    def enroll(self, student_id: int, subject_id: int) -> Subject:
        """Give the student their own copy of the subject and return that copy."""
        student = self._require_student(student_id)
        subject = self.subject_by_id(subject_id)
        if subject is None:
            raise SchoolError(f"Subject with ID {subject_id} not found")
        if student.has_subject(subject_id):
            raise SchoolError(f"Student already has subject: {subject.name}")
        copy = dataclasses.replace(subject)
        student.subjects.insert(0, copy)
        return copy

    def set_grade(self, student_id: int, subject_id: int, grade: int) -> None:
        """Record a grade for a subject the student is enrolled in."""
        student = self._require_student(student_id)
        subject = student._subject(subject_id)
        if subject is None:
            raise SchoolError(f"Student does not have subject with id {subject_id}")
        subject.grade = grade

    def grade(self, student_id: int, subject_id: int) -> int:
        """Return the student's grade in a subject they are enrolled in."""
        student = self._require_student(student_id)
        subject = student._subject(subject_id)
        if subject is None:
            raise SchoolError(f"Student does not have subject with id {subject_id}")
        return subject.grade

    # -- queries --------------------------------------------------------

    def students_by_subject(self, subject_id: int) -> list[Student]:
        return [s for s in self.students if s._subject(subject_id) is not None]

    def teachers_of_student(self, student_id: int) -> list[str]:
        student = self._require_student(student_id)
        return [s.teacher for s in student.subjects]

    def students_by_teacher(self, teacher: str) -> list[Student]:
        """Students taught by the teacher, once per matching subject."""
        return [
            student
            for student in self.students
            for subject in student.subjects
            if subject.teacher == teacher
        ]


def _clean(text: str) -> str:
    return text[:_MAX_NAME].split("\n", 1)[0]


def format_subject(subject: Subject) -> str:
    return f"\t{subject.subject_id}\t{_clean(subject.name)}\t\t{_clean(subject.teacher)}\n\n"


def format_subjects(subjects: list[Subject]) -> str:
    if not subjects:
        raise SchoolError("No subjects to print")
    body = "".join(format_subject(s) for s in subjects)
    return "Subject id\tSubject\t\tTeacher\n\n" + body


def format_student(student: Student) -> str:
    names = "".join(f"{s.name}  " for s in student.subjects)
    return f"\t{student.student_id}\t{_clean(student.name)}\t\t{names}\n"


def format_students(students: list[Student]) -> str:
    if not students:
        raise SchoolError("No students to print")
    body = "".join(format_student(s) for s in students)
    return "Student id\tName\t\tSubjects\n\n" + body + "\n"


def format_student_grades(student: Student) -> str:
    if student.subjects:
        parts = "".join(
            f"{s.name}({s.grade})  " if s.grade > 0 else f"{s.name}(-)  "
            for s in student.subjects
        )
    else:
        parts = "(no subjects)"
    return f"\t{student.student_id}\t{_clean(student.name)}\t\t{parts}\n"