"""Administrator accounts."""

from __future__ import annotations

from dataclasses import dataclass

from tuitioncentre.db import Database


@dataclass
class Admin:
    """An administrator identified by id and password."""

    admin_id: str = ""
    admin_pass: str = ""

    def login(self, db: Database) -> bool:
        """Check the credentials; on success refresh the fields from the record."""
        rows = db.query(
            "SELECT * FROM admin WHERE AdminID=? AND AdminPass=?",
            (self.admin_id, self.admin_pass),
        )
        if len(rows) != 1:
            return False
        row = rows[0]
        self.admin_id = row["AdminID"]
        self.admin_pass = row["AdminPass"]
        return True