"""Saving and loading the school register as pipe-separated text files."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from coursework.school import School, Student, Subject

SUBJECTS_FILE = "subjects.txt"
STUDENTS_FILE = "students.txt"

_MAX_FIELD = 255
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, none gives 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _tokens(text: str, separator: str) -> list[str]:
    """Split on a separator, dropping empty pieces."""
    return [piece for piece in text.split(separator) if piece]


def _lines(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            yield line.split("\n", 1)[0]


def save_subjects(subjects: Iterable[Subject], path: str | Path) -> None:
    """Write one ``id|name|teacher`` line per subject."""
    with Path(path).open("w", encoding="utf-8") as handle:
        for subject in subjects:
            handle.write(f"{subject.subject_id}|{subject.name}|{subject.teacher}\n")


def save_students(students: Iterable[Student], path: str | Path) -> None:
    """Write one ``id|name|subject_ids|grades`` line per student."""
    with Path(path).open("w", encoding="utf-8") as handle:
        for student in students:
            ids = ",".join(str(s.subject_id) for s in student.subjects)
            grades = ",".join(str(s.grade) for s in student.subjects)
            handle.write(f"{student.student_id}|{student.name}|{ids}|{grades}\n")


def load_subjects(path: str | Path) -> list[Subject]:
    """Read subjects; a missing file gives an empty list and bad lines are skipped."""
    path = Path(path)
    if not path.exists():
        return []
    subjects = []
    for line in _lines(path):
        fields = _tokens(line, "|")
        if len(fields) < 3:
            continue
        subjects.append(
            Subject(_atoi(fields[0]), fields[1][:_MAX_FIELD], fields[2][:_MAX_FIELD])
        )
    return subjects


def load_students(path: str | Path, subjects: Iterable[Subject]) -> list[Student]:
    """Read students, resolving their subjects against the given master list.

    Subject ids that are not in the master list are dropped. Each resolved
    subject is put at the front of the student's list, so a student's
    subjects come back in the reverse of the order they were written in.
    """
    path = Path(path)
    if not path.exists():
        return []
    master = list(subjects)
    students = []
    for line in _lines(path):
        fields = _tokens(line, "|")
        if len(fields) < 2:
            continue
        student = Student(_atoi(fields[0]), fields[1][:_MAX_FIELD])
        if len(fields) >= 3:
            subject_ids = _tokens(fields[2][:_MAX_FIELD], ",")
            grades = _tokens(fields[3][:_MAX_FIELD], ",") if len(fields) >= 4 else []
            for position, raw_id in enumerate(subject_ids):
                subject_id = _atoi(raw_id)
                grade = _atoi(grades[position]) if position < len(grades) else 0
                found = next(
                    (s for s in master if subject_id > 0 and s.subject_id == subject_id),
                    None,
                )
                if found is not None:
                    student.subjects.insert(0, dataclasses.replace(found, grade=grade))
        students.append(student)
    return students


def save_school(school: School, directory: str | Path = ".") -> None:
    """Save subjects and students into the standard files in a directory."""
    directory = Path(directory)
    save_subjects(school.subjects, directory / SUBJECTS_FILE)
    save_students(school.students, directory / STUDENTS_FILE)


def load_school(directory: str | Path = ".") -> School:
    """Load a school from the standard files; id counters continue from the largest ids."""
    directory = Path(directory)
    school = School()
    for subject in load_subjects(directory / SUBJECTS_FILE):
        school.insert_subject(subject)
    for student in load_students(directory / STUDENTS_FILE, school.subjects):
        school.insert_student(student)
    return school