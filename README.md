# tuitioncentre

A small library for keeping the records of a tuition centre: student
accounts, the subjects on offer, who is enrolled in what, fee payments and
the feedback students leave for their tutors. Everything is stored in a
local SQLite database through the standard library; nothing else needs to
be installed.

## Modules

- **`tuitioncentre.db`**: `Database(path)` opens the database (by default
  `tuitioncentre.db` in the working directory). `create_schema()` creates the
  `admin`, `tutor`, `student`, `subject`, `enrollment` and `payment` tables
  when they are missing. `execute(query, params)` runs a statement, commits
  it and returns the affected row count; `query` returns all rows and
  `query_one` the first row or `None`. A `Database` is a context manager and
  closes itself on exit. Any SQLite failure is raised as `DatabaseError`.
- **`tuitioncentre.admin`**: `Admin(admin_id, admin_pass).login(db)` returns
  whether exactly one admin record matches.
- **`tuitioncentre.student`**: `StudentAccount` with `login` (active accounts
  only), `insert`, `update` (name and phone number), `remove` (also deletes
  the student's enrolments and frees their subject places), `deactivate`,
  `reactivate`, `is_registered_ic`, `is_registered_phone`,
  `subjects_enrolled`, `unpaid_subjects`, `timetable` (a list of
  `TimetableEntry`, with `N/A` for missing tutor, date, status or fee period)
  and `format_timetable`. `age_from_id(today=None)` takes the two-digit birth
  year at the start of the student id and subtracts it from the two-digit
  current year; it raises `ValueError` when the id does not start with two
  digits. `list_students(db)` returns every account.
- **`tuitioncentre.subject`**: `Subject` with `insert` (an empty tutor id is
  stored as no tutor), `remove` (returns `False` when the subject does not
  exist; deletes its enrolments, and when no subject of that name is left,
  resets the tutor's expertise to `NONE`) and `is_unassigned`. Helpers:
  `list_subjects` (tutor id `NONE` when there is no tutor),
  `enrollment_status`, `tutor_id_of`, `subject_id_of_tutor`, `is_full`
  (a subject is full at a quota of 15), `category_age`, `subject_name`,
  `subjects_for_age` (tutored subjects only, as `SubjectOffer` tuples) and
  `format_subject_table`.
- **`tuitioncentre.enrollment`**: `enroll` (adds each enrolment, then raises
  each subject's quota by one), `unenroll`, `already_enrolled`,
  `give_feedback`, `fees_period`, `enrollment_details` (missing feedback shown
  as `N/A`), `enrolled_subjects`, `format_enrolled` and
  `tutor_feedback_report`, which lists a tutor's students youngest first with
  counts of 16- and 17-year-olds out of 15.
- **`tuitioncentre.payment`**: `Payment.insert(db)` records a payment (the
  database assigns its id and date) and `Payment.mark_paid(db, subject_id)`
  sets the student's enrolment in that subject to `PAID`.

### Connector helpers

- **`tuitioncentre.connector.errors`**: `Error`, `throw_error(msg)`, and
  `Warning` diagnostics with a `WarningLevel`, printed as
  `Warning 1366: message`.
- **`tuitioncentre.connector.value`**: `Value`, a null, integer, float,
  boolean, string or raw-bytes value with checked conversions
  (`as_bool`, `as_uint`, `as_sint`, `as_float`, `as_double`, `as_bytes`,
  `as_string`) that raise `Error` when a conversion is not possible.
- **`tuitioncentre.connector.row`**: `Row`, fields addressed by position;
  `set` grows the row, `field` creates a missing field as NULL, `get` and
  indexing raise `IndexError` for a missing field.
- **`tuitioncentre.connector.executable`**: `Operation` (abstract `execute`
  and `clone`) and `Executable`, whose copies clone the operation so they
  are independent.
- **`tuitioncentre.connector.settings`**: `Settings`, an ordered list of
  `SessionOption` values; `get` returns the last value given, `erase`
  removes every occurrence.
- **`tuitioncentre.connector.charsets`**: the server's character sets and
  collations: `charsets()`, `collations(charset)`, `collation_by_id(id)`
  and `charset_of(id)`.

## Example

```python
from tuitioncentre.db import Database
from tuitioncentre.enrollment import already_enrolled, enroll
from tuitioncentre.subject import Subject, format_subject_table, list_subjects

with Database("centre.sqlite3") as db:
    db.create_schema()

    Subject(subject_id="MATH16", name="Mathematics", fees=80.0, category_age=16).insert(db)

    for subject in list_subjects(db):
        print(subject)

    enroll(db, "S0001", ["MATH16"])
    assert already_enrolled(db, "S0001", "MATH16")

    print(format_subject_table(db, 16))
```

```python
from tuitioncentre.connector.charsets import charset_of, collations

print(charset_of(255))                 # utf8mb4
print(len(collations("latin1")))       # 8
```

## What it does not do

This is a library only. It has no command to run and no interactive menu
or screens for admins, students or tutors; the `format_*` functions and
`tutor_feedback_report` return text for a caller to print. Storage is a
local SQLite file, not a database server, and the connector helpers do not
open network connections.

## Running the tests

The tests use pytest, which comes with the `test` extra:

```
pip install -e ".[test]"
pytest
```