# coursework

An interactive school management system together with a handful of small
utilities: a singly linked list, text helpers, bit-field decoding, simple
formulas and a threaded prime-number finder.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The school management system

Start the interactive menu with:

```
coursework-school
```

By default the program works with `subjects.txt` and `students.txt` in the
current directory; pass `-d DIR` / `--directory DIR` to use another directory.

On start-up it loads both files. If there are no subjects yet, it asks for a
first subject and its teacher; if there are no students yet, it asks for a
first student. Then it shows the menu:

```
1) Add subject with teacher
2) Add student
3) Add subject to student
4) Add grade to student per subject
5) Find students studying a subject
6) Find teacher teaching a subject
7) Find grades for a student in a subject
8) Print student with subjects and grades
9) Find teachers teaching a student
10) Find students taught by a teacher
11) Print all subjects
12) Print all students
13) Save data to files
0) Exit
```

After each action it waits for Enter. Choosing `0`, or reaching the end of
input, leaves the menu; the data is then saved to the two files.

Subject names are unique ignoring case; student names are unique and
case-sensitive. A grade outside 0–100 is accepted with a warning.

### File formats

`subjects.txt` holds one subject per line:

```
subject_id|subject_name|teacher
```

`students.txt` holds one student per line, with the subject ids and the grades
as parallel comma-separated lists:

```
student_id|student_name|subject_id1,subject_id2|grade1,grade2
```

When loading, lines with too few fields are skipped, subject ids that are not
in the subject list are dropped, and a missing grade counts as 0. A student's
subjects are held most recently enrolled first, and loading puts each one at
the front, so the order of a student's subjects is reversed on each load. The
id counters continue from the largest ids read.

### Using the model from Python

```python
from coursework.school import School, format_students

school = School()
maths = school.add_subject("Maths", "Smith")
alice = school.add_student("Alice")
school.enroll(alice.student_id, maths.subject_id)
school.set_grade(alice.student_id, maths.subject_id, 87)
print(school.grade(alice.student_id, maths.subject_id))
print(format_students(school.students))
```

`School` also offers `subject_by_id`, `subject_by_name`, `subject_by_teacher`,
`student_by_id`, `student_by_name`, `students_by_subject`,
`teachers_of_student` and `students_by_teacher`. Operations that cannot be
carried out (an empty or duplicate name, an unknown id, a subject the student
does not have) raise `coursework.school.SchoolError`. `format_subject`,
`format_subjects`, `format_student`, `format_students` and
`format_student_grades` produce the tab-separated listings the menu prints.

`coursework.storage` offers `save_school(school, directory)` and
`load_school(directory)`, and the lower-level `save_subjects`,
`save_students`, `load_subjects` and `load_students`.

## Utilities

- `coursework.linkedlist.LinkedList` — a singly linked list of values with
  `push_front`, `push_back`, `find`, `insert_after`, `pop_front`, `pop_back`,
  `remove_after` and `clear`; it supports `len()`, iteration, and `str()`
  gives the values separated by spaces. `find` returns a `Node`, which
  `insert_after` and `remove_after` take as their target.
- `coursework.textutils` — `reverse_string`, `count_words`, `count_word`,
  `sort_characters`, `count_words_in_file`, `strip_leading` (spaces, tabs and
  newlines) and `strip_trailing` (spaces only). Words are separated by spaces.
- `coursework.bitfields` — `decode_prot` splits a 16-bit value into its
  6-bit type, 3-bit priority and 7-bit id (`ProtFields`, whose `pack` puts
  them back together), plus `to_binary`, `set_bit`, `clear_bit`, `flip_bit`
  and `test_bit`.
- `coursework.formulas` — `fourteen_x_minus_fifteen`, `twice_minus_one`,
  `square`, `triple_plus_five`, `celsius_to_fahrenheit`.
- `coursework.primes` — `is_prime`; `find_primes(limit)`, which returns the
  primes below `limit` found by one thread and collected by another; and
  `PrimeChannel`, a one-slot hand-off whose `publish` waits until the previous
  prime has been taken and whose `take(timeout)` returns `None` if nothing
  arrives in time.