"""Student accounts: registration, login, status and timetable."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from tuitioncentre.db import Database, DatabaseError

ACTIVE = "ACTIVE"
DEACTIVATED = "DEACTIVATED"
_MISSING = "N/A"


class TimetableEntry(NamedTuple):
    """One subject on a student's timetable."""

    subject_name: str
    tutoring_date: str
    tutor_name: str
    status: str
    fees_period: str


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _or_missing(value: object) -> str:
    return _MISSING if value is None else str(value)


@dataclass
class StudentAccount:
    """A student's account record."""

    student_id: str = ""
    student_pass: str = ""
    name: str = ""
    age: int = 0
    phone_number: str = ""
    admin_id: str = ""
    subject_id: str = ""
    account_status: str = ""

    def login(self, db: Database) -> bool:
        """Check the credentials of an active account; refresh fields on success."""
        rows = db.query(
            "SELECT * FROM student WHERE StudentID=? AND StudentPass=?"
            " AND AccountStatus='ACTIVE'",
            (self.student_id, self.student_pass),
        )
        if len(rows) != 1:
            return False
        row = rows[0]
        self.student_id = _text(row["StudentID"])
        self.student_pass = _text(row["StudentPass"])
        self.name = _text(row["Name"])
        self.age = row["Age"] or 0
        self.phone_number = _text(row["Phone_Number"])
        self.admin_id = _text(row["AdminID"])
        return True

    def insert(self, db: Database) -> None:
        """Register this student."""
        db.execute(
            "INSERT INTO student (StudentID, StudentPass, Name, Age, Phone_Number,"
            " AdminID) VALUES (?,?,?,?,?,?)",
            (
                self.student_id,
                self.student_pass,
                self.name,
                self.age,
                self.phone_number,
                self.admin_id,
            ),
        )

    def update(self, db: Database) -> None:
        """Store this student's name and phone number."""
        db.execute(
            "UPDATE student SET Name=?, Phone_Number=? WHERE StudentID=?",
            (self.name, self.phone_number, self.student_id),
        )

    def _exists(self, db: Database) -> bool:
        rows = db.query("SELECT * FROM student WHERE StudentID=?", (self.student_id,))
        return len(rows) == 1

    def remove(self, db: Database) -> bool:
        """Delete the student and their enrollments, freeing subject places."""
        if not self._exists(db):
            return False
        try:
            db.execute(
                "UPDATE subject SET Quota = Quota - 1 WHERE SubjectID IN"
                " (SELECT SubjectID FROM enrollment WHERE StudentID=?)",
                (self.student_id,),
            )
            db.execute("DELETE FROM enrollment WHERE StudentID=?", (self.student_id,))
            db.execute("DELETE FROM student WHERE StudentID=?", (self.student_id,))
        except DatabaseError:
            return False
        return True

    def _set_status(self, db: Database, status: str) -> bool:
        if not self._exists(db):
            return False
        db.execute(
            "UPDATE student SET AccountStatus=? WHERE StudentID=?",
            (status, self.student_id),
        )
        return True

    def deactivate(self, db: Database) -> bool:
        """Mark the account deactivated; False when the student does not exist."""
        return self._set_status(db, DEACTIVATED)

    def reactivate(self, db: Database) -> bool:
        """Mark the account active again; False when the student does not exist."""
        return self._set_status(db, ACTIVE)

    def age_from_id(self, today: date | None = None) -> int:
        """Work out the age from the two-digit birth year leading the student id."""
        birth_year = self.student_id[:2]
        if len(birth_year) != 2 or not birth_year.isdigit():
            raise ValueError(f"Student id {self.student_id!r} has no birth year")
        today = today or date.today()
        return today.year % 100 - int(birth_year)

    def is_registered_ic(self, db: Database) -> bool:
        """Tell whether a student with this id is registered."""
        rows = db.query(
            "SELECT StudentID FROM student WHERE StudentID=?", (self.student_id,)
        )
        return len(rows) == 1

    def is_registered_phone(self, db: Database) -> bool:
        """Tell whether this phone number belongs to a registered student."""
        rows = db.query(
            "SELECT Phone_Number FROM student WHERE Phone_Number=?",
            (self.phone_number,),
        )
        return len(rows) == 1

    def subjects_enrolled(self, db: Database) -> list[str]:
        """Return the ids of the subjects this student is enrolled in."""
        rows = db.query(
            "SELECT SubjectID FROM enrollment WHERE StudentID=?", (self.student_id,)
        )
        return [_text(row["SubjectID"]) for row in rows]

    def timetable(self, db: Database) -> list[TimetableEntry]:
        """Return the student's subjects with tutor, date, status and fee period."""
        rows = db.query(
            "SELECT subject.Name AS SubjectName, tutor.Name AS TutorName,"
            " tutor.Available_Tutoring_Date, enrollment.Status, enrollment.FeesPeriod"
            " FROM enrollment JOIN subject ON enrollment.SubjectID = subject.SubjectID"
            " LEFT JOIN tutor ON subject.TutorID = tutor.TutorID"
            " WHERE enrollment.StudentID=?",
            (self.student_id,),
        )
        return [
            TimetableEntry(
                subject_name=_text(row["SubjectName"]),
                tutoring_date=_or_missing(row["Available_Tutoring_Date"]),
                tutor_name=_or_missing(row["TutorName"]),
                status=_or_missing(row["Status"]),
                fees_period=_or_missing(row["FeesPeriod"]),
            )
            for row in rows
        ]

    def format_timetable(self, db: Database) -> str:
        """Render the timetable as table rows."""
        return "".join(
            f"| {entry.subject_name:<40}| {entry.tutoring_date:<24}"
            f"| {entry.tutor_name:<24}| {entry.status:<24}| {entry.fees_period:<39}|\n"
            for entry in self.timetable(db)
        )

    def unpaid_subjects(self, db: Database) -> list[str]:
        """Return the ids of the subjects this student has not paid for."""
        rows = db.query(
            "SELECT SubjectID FROM enrollment WHERE Status='UNPAID' AND StudentID=?",
            (self.student_id,),
        )
        return [_text(row["SubjectID"]) for row in rows]


def list_students(db: Database) -> list[StudentAccount]:
    """Return every registered student."""
    return [
        StudentAccount(
            student_id=_text(row["StudentID"]),
            student_pass=_text(row["StudentPass"]),
            name=_text(row["Name"]),
            age=row["Age"] or 0,
            phone_number=_text(row["Phone_Number"]),
            account_status=_text(row["AccountStatus"]),
        )
        for row in db.query("SELECT * FROM student")
    ]