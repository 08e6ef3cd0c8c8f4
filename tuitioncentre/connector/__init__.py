"""Errors, values, rows, executable operations, session settings and character-set tables."""