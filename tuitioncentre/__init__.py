"""Records for running a tuition centre: students, subjects, enrolments, payments and feedback."""

__version__ = "1.0.0"