"""Enrollment of students in subjects, feedback and fee status."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tuitioncentre.db import Database

MAX_STUDENTS = 15

_RULE = "-" * 128 + "\n"
_REPORT_HEADER = (
    _RULE
    + "|           Name\t\t\t\t |           Age           |"
    + "                        Feedback\t\t        |\n"
    + _RULE
)


@dataclass
class Enrollment:
    """One student's enrollment in one subject."""

    student_id: str = ""
    subject_id: str = ""
    feedback: str = ""
    status: str = ""


def enroll(db: Database, student_id: str, subject_ids: Iterable[str]) -> None:
    """Enroll a student in each subject and count them against its quota."""
    subject_ids = list(subject_ids)
    for subject_id in subject_ids:
        db.execute(
            "INSERT INTO enrollment (StudentID, SubjectID) VALUES (?,?)",
            (student_id, subject_id),
        )
    for subject_id in subject_ids:
        db.execute(
            "UPDATE subject SET Quota=Quota+1 WHERE SubjectID=?", (subject_id,)
        )


def give_feedback(db: Database, student_id: str, subject_id: str, feedback: str) -> bool:
    """Store feedback on an enrollment; False when the enrollment is not unique."""
    rows = db.query(
        "SELECT * FROM enrollment WHERE SubjectID=? AND StudentID=?",
        (subject_id, student_id),
    )
    if len(rows) != 1:
        return False
    db.execute(
        "UPDATE enrollment SET Feedback=? WHERE SubjectID=? AND StudentID=?",
        (feedback, subject_id, student_id),
    )
    return True


def enrollment_details(db: Database) -> list[Enrollment]:
    """Return every enrollment; missing feedback is shown as 'N/A'."""
    return [
        Enrollment(
            student_id=row["StudentID"] or "",
            subject_id=row["SubjectID"] or "",
            feedback=row["Feedback"] if row["Feedback"] is not None else "N/A",
            status=row["Status"] or "",
        )
        for row in db.query("SELECT * FROM enrollment")
    ]


def already_enrolled(db: Database, student_id: str, subject_id: str) -> bool:
    """Tell whether the student is enrolled in the subject."""
    rows = db.query(
        "SELECT * FROM enrollment WHERE StudentID=? AND SubjectID=?",
        (student_id, subject_id),
    )
    return len(rows) > 0


def fees_period(db: Database, student_id: str, subject_id: str) -> str:
    """Return the fees period of an enrollment, or an empty string."""
    rows = db.query(
        "SELECT FeesPeriod FROM enrollment WHERE StudentID=? AND SubjectID=?",
        (student_id, subject_id),
    )
    if len(rows) != 1:
        return ""
    return rows[0]["FeesPeriod"] or ""


def tutor_feedback_report(db: Database, tutor_id: str) -> str:
    """Render the feedback of all students taught by a tutor, youngest first."""
    if len(db.query("SELECT * FROM tutor WHERE TutorID=?", (tutor_id,))) != 1:
        return "\nTutor ID does not exist in the database.\n\n"

    rows = db.query(
        "SELECT student.Name, student.Age, enrollment.Feedback FROM student"
        " JOIN enrollment ON student.StudentID = enrollment.StudentID"
        " WHERE enrollment.SubjectID IN"
        " (SELECT SubjectID FROM subject WHERE TutorID=?)"
        " ORDER BY student.Age ASC",
        (tutor_id,),
    )
    if not rows:
        return "\nYou do not have any feedback.\n\n"

    lines = [_REPORT_HEADER]
    age16 = age17 = 0
    for row in rows:
        name = row["Name"] or ""
        age = row["Age"] or 0
        feedback = row["Feedback"] or ""
        if age == 16:
            age16 += 1
        elif age == 17:
            age17 += 1
        lines.append(f"| {name:<47}|{str(age):<25}| {feedback:<50}|\n")
    lines.append(_RULE)
    lines.append(
        f"\n\nThe total of students (Age 16) enrolled is : {age16}/{MAX_STUDENTS}"
    )
    lines.append(
        f"\nThe total of students (Age 17) enrolled is : {age17}/{MAX_STUDENTS}"
    )
    lines.append(
        f"\nThe total of students under guidance is : {len(rows)}/{MAX_STUDENTS}"
    )
    return "".join(lines)


def unenroll(db: Database, student_id: str, subject_id: str) -> bool:
    """Remove an enrollment and free its place; False when there is none."""
    if not already_enrolled(db, student_id, subject_id):
        return False
    db.execute(
        "DELETE FROM enrollment WHERE StudentID=? AND SubjectID=?",
        (student_id, subject_id),
    )
    db.execute(
        "UPDATE subject SET Quota = Quota - 1 WHERE SubjectID=?", (subject_id,)
    )
    return True


def enrolled_subjects(db: Database, student_id: str) -> list[tuple[str, str]]:
    """Return (subject id, subject name) for each subject the student takes."""
    rows = db.query(
        "SELECT e.SubjectID, s.Name FROM enrollment e"
        " JOIN subject s ON e.SubjectID = s.SubjectID WHERE e.StudentID=?",
        (student_id,),
    )
    return [(row["SubjectID"] or "", row["Name"] or "") for row in rows]


def format_enrolled(db: Database, student_id: str) -> str:
    """Render the student's subjects as table rows."""
    return "".join(
        f"| {subject_id:<24}|{name:<41}|\n"
        for subject_id, name in enrolled_subjects(db, student_id)
    )