"""Payments made by students."""

from __future__ import annotations

from dataclasses import dataclass

from tuitioncentre.db import Database


@dataclass
class Payment:
    """A payment record; the id and date are assigned by the database."""

    payment_id: str = ""
    student_id: str = ""
    total_subject: int = 0
    total_fees: float = 0.0
    payment_date: str = ""
    admin_id: str = ""

    def insert(self, db: Database) -> None:
        """Store this payment."""
        db.execute(
            "INSERT INTO payment (StudentID, Total_Subject, Total_Fees, AdminID)"
            " VALUES (?,?,?,?)",
            (self.student_id, self.total_subject, self.total_fees, self.admin_id),
        )

    def mark_paid(self, db: Database, subject_id: str) -> None:
        """Mark the student's enrollment in one subject as paid."""
        db.execute(
            "UPDATE enrollment SET Status='PAID' WHERE StudentID=? AND SubjectID=?",
            (self.student_id, subject_id),
        )