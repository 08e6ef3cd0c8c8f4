"""Subjects offered by the centre, their tutors and places."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from tuitioncentre.db import Database

MAX_QUOTA = 15
NO_TUTOR = "NONE"

_RULE = "-" * 135 + "\n"


class SubjectOffer(NamedTuple):
    """A subject with a tutor, as offered to students of one age."""

    subject_id: str
    name: str
    fees: float
    quota: int
    tutor_name: str
    lesson_date: str


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Subject:
    """A subject record."""

    subject_id: str = ""
    name: str = ""
    fees: float = 0.0
    quota: int = 0
    category_age: int = 0
    admin_id: str = ""
    tutor_id: str = ""

    def insert(self, db: Database) -> None:
        """Register this subject; an empty tutor id is stored as no tutor."""
        db.execute(
            "INSERT INTO subject (SubjectID, Name, Fees, Category_Age, AdminID, TutorID)"
            " VALUES (?,?,?,?,?,?)",
            (
                self.subject_id,
                self.name,
                self.fees,
                self.category_age,
                self.admin_id,
                self.tutor_id or None,
            ),
        )

    def remove(self, db: Database) -> bool:
        """Delete the subject and its enrollments; False when it does not exist.

        When no other subject of the same name is left, the tutor who taught it
        loses the expertise and lesson date.
        """
        row = db.query_one(
            "SELECT Name, TutorID FROM subject WHERE SubjectID=?", (self.subject_id,)
        )
        if row is None:
            return False
        name = _text(row["Name"])
        tutor_id = row["TutorID"]

        db.execute("DELETE FROM enrollment WHERE SubjectID = ?", (self.subject_id,))
        db.execute("DELETE FROM subject WHERE SubjectID=?", (self.subject_id,))

        remaining = db.query_one(
            "SELECT COUNT(Name) AS COUNTER FROM subject WHERE Name=?", (name,)
        )
        if remaining["COUNTER"] == 0 and tutor_id is not None:
            db.execute(
                "UPDATE tutor SET Subject_Experties='NONE',"
                " Available_Tutoring_Date='0000-00-00' WHERE TutorID=?",
                (tutor_id,),
            )
        return True

    def is_unassigned(self, db: Database) -> bool:
        """Tell whether a subject of this name still has no tutor."""
        rows = db.query(
            "SELECT Name FROM subject WHERE TutorID IS NULL AND Name=?", (self.name,)
        )
        return len(rows) > 0


def list_subjects(db: Database) -> list[Subject]:
    """Return every subject; a subject without a tutor has tutor id 'NONE'."""
    return [
        Subject(
            subject_id=_text(row["SubjectID"]),
            name=_text(row["Name"]),
            fees=row["Fees"] or 0.0,
            quota=row["Quota"] or 0,
            category_age=row["Category_Age"] or 0,
            tutor_id=NO_TUTOR if row["TutorID"] is None else str(row["TutorID"]),
        )
        for row in db.query("SELECT * FROM subject")
    ]


def _single(db: Database, query: str, params: tuple, column: str) -> object:
    rows = db.query(query, params)
    if len(rows) != 1:
        return None
    return rows[0][column]


def enrollment_status(db: Database, student_id: str, subject_id: str) -> str:
    """Return the payment status of an enrollment, or an empty string."""
    return _text(
        _single(
            db,
            "SELECT Status FROM enrollment WHERE StudentID=? AND SubjectID=?",
            (student_id, subject_id),
            "Status",
        )
    )


def tutor_id_of(db: Database, subject_id: str) -> str:
    """Return the id of the subject's tutor, or an empty string."""
    return _text(
        _single(
            db, "SELECT TutorID FROM subject WHERE SubjectID=?", (subject_id,), "TutorID"
        )
    )


def subject_id_of_tutor(db: Database, tutor_id: str) -> str:
    """Return the id of the one subject a tutor teaches, or an empty string."""
    return _text(
        _single(
            db, "SELECT SubjectID FROM subject WHERE TutorID=?", (tutor_id,), "SubjectID"
        )
    )


def is_full(db: Database, subject_id: str) -> bool:
    """Tell whether the subject has reached its quota of students."""
    quota = _single(
        db, "SELECT Quota FROM subject WHERE SubjectID=?", (subject_id,), "Quota"
    )
    return (quota or 0) >= MAX_QUOTA


def category_age(db: Database, subject_id: str) -> int:
    """Return the student age the subject is meant for, or 0."""
    age = _single(
        db,
        "SELECT Category_Age FROM subject WHERE SubjectID=?",
        (subject_id,),
        "Category_Age",
    )
    return age or 0


def subject_name(db: Database, subject_id: str) -> str:
    """Return the name of the subject, or an empty string."""
    return _text(
        _single(db, "SELECT Name FROM subject WHERE SubjectID=?", (subject_id,), "Name")
    )


def subjects_for_age(db: Database, age: int) -> list[SubjectOffer]:
    """Return the tutored subjects offered to students of the given age."""
    rows = db.query(
        "SELECT subject.SubjectID, subject.Name AS SubjectName, subject.Fees,"
        " subject.Quota, tutor.Name AS TutorName, tutor.Available_Tutoring_Date"
        " FROM subject JOIN tutor ON subject.TutorID = tutor.TutorID"
        " WHERE subject.Category_Age=?",
        (age,),
    )
    return [
        SubjectOffer(
            subject_id=_text(row["SubjectID"]),
            name=_text(row["SubjectName"]),
            fees=row["Fees"] or 0.0,
            quota=row["Quota"] or 0,
            tutor_name=_text(row["TutorName"]),
            lesson_date=_text(row["Available_Tutoring_Date"]),
        )
        for row in rows
    ]


def format_subject_table(db: Database, age: int) -> str:
    """Render the subjects offered to students of the given age as a table."""
    lines = [
        "LIST OF SUBJECT(S)\n*******************************\n"
        f"List of all subject offered for student age: {age}\n\n\n",
        _RULE,
        f"|{'SubjectID':>15}|{'Name':>25}|{'Fees(RM)':>15}|{'Quota Left':>18}"
        f"|{'Tutor Name':>35}|{'Lesson Date':>20}|\n",
        _RULE,
    ]
    for offer in subjects_for_age(db, age):
        quota = f"{'<<FULL>>|':>19}" if offer.quota == 0 else f"{offer.quota:>15}   |"
        lines.append(
            f"|{offer.subject_id:>15}|{offer.name:>25}|{_number(offer.fees):>15}|"
            f"{quota}{offer.tutor_name:>35}|{offer.lesson_date:>20}|\n"
        )
    lines.append(_RULE)
    return "".join(lines)