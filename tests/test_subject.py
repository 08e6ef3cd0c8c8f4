import pytest

from tuitioncentre.db import Database
from tuitioncentre.subject import (
    MAX_QUOTA,
    NO_TUTOR,
    Subject,
    category_age,
    enrollment_status,
    format_subject_table,
    is_full,
    list_subjects,
    subject_id_of_tutor,
    subject_name,
    subjects_for_age,
    tutor_id_of,
)


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "centre.db"))
    database.create_schema()
    yield database
    database.close()


def _tutor(db, tutor_id, name, date_text):
    db.execute(
        "INSERT INTO tutor (TutorID, Name, Subject_Experties, Available_Tutoring_Date)"
        " VALUES (?,?,?,?)",
        (tutor_id, name, "Maths", date_text),
    )


def test_insert_without_tutor_lists_none(db):
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "").insert(db)
    subjects = list_subjects(db)
    assert len(subjects) == 1
    assert subjects[0].subject_id == "S1"
    assert subjects[0].tutor_id == NO_TUTOR
    assert subjects[0].category_age == 16
    assert tutor_id_of(db, "S1") == ""


def test_insert_with_tutor(db):
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "T1").insert(db)
    assert tutor_id_of(db, "S1") == "T1"
    assert subject_id_of_tutor(db, "T1") == "S1"
    assert subject_id_of_tutor(db, "T9") == ""


def test_is_unassigned(db):
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "").insert(db)
    Subject("S2", "Physics", 60.0, 0, 17, "A1", "T1").insert(db)
    assert Subject(name="Maths").is_unassigned(db) is True
    assert Subject(name="Physics").is_unassigned(db) is False


def test_lookups_for_missing_subject(db):
    assert subject_name(db, "X") == ""
    assert category_age(db, "X") == 0
    assert is_full(db, "X") is False
    assert enrollment_status(db, "ST", "X") == ""


def test_lookups_for_existing_subject(db):
    Subject("S1", "Maths", 50.0, 0, 17, "A1", "").insert(db)
    assert subject_name(db, "S1") == "Maths"
    assert category_age(db, "S1") == 17


def test_is_full_at_quota(db):
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "").insert(db)
    db.execute("UPDATE subject SET Quota=? WHERE SubjectID=?", (MAX_QUOTA - 1, "S1"))
    assert is_full(db, "S1") is False
    db.execute("UPDATE subject SET Quota=? WHERE SubjectID=?", (MAX_QUOTA, "S1"))
    assert is_full(db, "S1") is True


def test_enrollment_status(db):
    db.execute(
        "INSERT INTO enrollment (StudentID, SubjectID, Status) VALUES (?,?,?)",
        ("ST1", "S1", "PAID"),
    )
    assert enrollment_status(db, "ST1", "S1") == "PAID"


def test_remove_missing_subject(db):
    assert Subject(subject_id="nope").remove(db) is False


def test_remove_deletes_enrollments_and_resets_tutor(db):
    _tutor(db, "T1", "Ann", "2024-01-01")
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "T1").insert(db)
    db.execute("INSERT INTO enrollment (StudentID, SubjectID) VALUES (?,?)", ("ST", "S1"))
    assert Subject(subject_id="S1").remove(db) is True
    assert list_subjects(db) == []
    assert db.query("SELECT * FROM enrollment") == []
    tutor = db.query_one("SELECT * FROM tutor WHERE TutorID=?", ("T1",))
    assert tutor["Subject_Experties"] == "NONE"
    assert tutor["Available_Tutoring_Date"] == "0000-00-00"


def test_remove_keeps_tutor_when_name_remains(db):
    _tutor(db, "T1", "Ann", "2024-01-01")
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "T1").insert(db)
    Subject("S2", "Maths", 50.0, 0, 17, "A1", "T1").insert(db)
    assert Subject(subject_id="S1").remove(db) is True
    tutor = db.query_one("SELECT * FROM tutor WHERE TutorID=?", ("T1",))
    assert tutor["Subject_Experties"] == "Maths"
    assert [s.subject_id for s in list_subjects(db)] == ["S2"]


def test_subjects_for_age_only_tutored(db):
    _tutor(db, "T1", "Ann", "2024-01-01")
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "T1").insert(db)
    Subject("S2", "Art", 40.0, 0, 16, "A1", "").insert(db)
    Subject("S3", "Physics", 40.0, 0, 17, "A1", "T1").insert(db)
    offers = subjects_for_age(db, 16)
    assert [o.subject_id for o in offers] == ["S1"]
    assert offers[0].tutor_name == "Ann"
    assert offers[0].lesson_date == "2024-01-01"


def test_format_subject_table(db):
    _tutor(db, "T1", "Ann", "2024-01-01")
    Subject("S1", "Maths", 50.0, 0, 16, "A1", "T1").insert(db)
    Subject("S2", "Physics", 40.0, 0, 16, "A1", "T1").insert(db)
    db.execute("UPDATE subject SET Quota=3 WHERE SubjectID='S2'")
    table = format_subject_table(db, 16)
    assert table.startswith("LIST OF SUBJECT(S)\n")
    assert "List of all subject offered for student age: 16\n" in table
    lines = table.splitlines()
    maths = next(line for line in lines if "Maths" in line)
    physics = next(line for line in lines if "Physics" in line)
    assert "<<FULL>>|" in maths
    assert "<<FULL>>" not in physics
    assert len(maths) == len(physics)
    assert "Quota Left" in table