"""Character sets known to the server and the collations that belong to them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Collation:
    """A server collation: its numeric id, character set, name and sensitivity.

    The sensitivity is 'bin' for binary collations, otherwise a combination
    of flags such as 'ci' or 'ai_ci'.
    """

    id: int
    charset: str
    name: str
    sensitivity: str

    @property
    def is_binary(self) -> bool:
        return self.sensitivity == "bin"


# Per character set, in the order the server lists them: (id, name, sensitivity).
_COLLATIONS: dict[str, tuple[tuple[int, str, str], ...]] = {
    "big5": ((1, "chinese", "ci"), (84, "bin", "bin")),
    "dec8": ((3, "swedish", "ci"), (69, "bin", "bin")),
    "cp850": ((4, "general", "ci"), (80, "bin", "bin")),
    "hp8": ((6, "english", "ci"), (72, "bin", "bin")),
    "koi8r": ((7, "general", "ci"), (74, "bin", "bin")),
    "latin1": (
        (5, "german1", "ci"),
        (8, "swedish", "ci"),
        (15, "danish", "ci"),
        (31, "german2", "ci"),
        (47, "bin", "bin"),
        (48, "general", "ci"),
        (49, "general", "cs"),
        (94, "spanish", "ci"),
    ),
    "latin2": (
        (2, "czech", "cs"),
        (9, "general", "ci"),
        (21, "hungarian", "ci"),
        (27, "croatian", "ci"),
        (77, "bin", "bin"),
    ),
    "swe7": ((10, "swedish", "ci"), (82, "bin", "bin")),
    "ascii": ((11, "general", "ci"), (65, "bin", "bin")),
    "ujis": ((12, "japanese", "ci"), (91, "bin", "bin")),
    "sjis": ((13, "japanese", "ci"), (88, "bin", "bin")),
    "hebrew": ((16, "general", "ci"), (71, "bin", "bin")),
    "tis620": ((18, "thai", "ci"), (89, "bin", "bin")),
    "euckr": ((19, "korean", "ci"), (85, "bin", "bin")),
    "koi8u": ((22, "general", "ci"), (75, "bin", "bin")),
    "gb2312": ((24, "chinese", "ci"), (86, "bin", "bin")),
    "greek": ((25, "general", "ci"), (70, "bin", "bin")),
    "cp1250": (
        (26, "general", "ci"),
        (34, "czech", "cs"),
        (44, "croatian", "ci"),
        (66, "bin", "bin"),
        (99, "polish", "ci"),
    ),
    "gbk": ((28, "chinese", "ci"), (87, "bin", "bin")),
    "latin5": ((30, "turkish", "ci"), (78, "bin", "bin")),
    "armscii8": ((32, "general", "ci"), (64, "bin", "bin")),
    "utf8mb3": (
        (33, "general", "ci"),
        (76, "tolower", "ci"),
        (83, "bin", "bin"),
        (192, "unicode", "ci"),
        (193, "icelandic", "ci"),
        (194, "latvian", "ci"),
        (195, "romanian", "ci"),
        (196, "slovenian", "ci"),
        (197, "polish", "ci"),
        (198, "estonian", "ci"),
        (199, "spanish", "ci"),
        (200, "swedish", "ci"),
        (201, "turkish", "ci"),
        (202, "czech", "ci"),
        (203, "danish", "ci"),
        (204, "lithuanian", "ci"),
        (205, "slovak", "ci"),
        (206, "spanish2", "ci"),
        (207, "roman", "ci"),
        (208, "persian", "ci"),
        (209, "esperanto", "ci"),
        (210, "hungarian", "ci"),
        (211, "sinhala", "ci"),
        (212, "german2", "ci"),
        (213, "croatian", "ci"),
        (214, "unicode_520", "ci"),
        (215, "vietnamese", "ci"),
        (223, "general_mysql500", "ci"),
    ),
    "ucs2": (
        (35, "general", "ci"),
        (90, "bin", "bin"),
        (128, "unicode", "ci"),
        (129, "icelandic", "ci"),
        (130, "latvian", "ci"),
        (131, "romanian", "ci"),
        (132, "slovenian", "ci"),
        (133, "polish", "ci"),
        (134, "estonian", "ci"),
        (135, "spanish", "ci"),
        (136, "swedish", "ci"),
        (137, "turkish", "ci"),
        (138, "czech", "ci"),
        (139, "danish", "ci"),
        (140, "lithuanian", "ci"),
        (141, "slovak", "ci"),
        (142, "spanish2", "ci"),
        (143, "roman", "ci"),
        (144, "persian", "ci"),
        (145, "esperanto", "ci"),
        (146, "hungarian", "ci"),
        (147, "sinhala", "ci"),
        (148, "german2", "ci"),
        (149, "croatian", "ci"),
        (150, "unicode_520", "ci"),
        (151, "vietnamese", "ci"),
        (159, "general_mysql500", "ci"),
    ),
    "cp866": ((36, "general", "ci"), (68, "bin", "bin")),
    "keybcs2": ((37, "general", "ci"), (73, "bin", "bin")),
    "macce": ((38, "general", "ci"), (43, "bin", "bin")),
    "macroman": ((39, "general", "ci"), (53, "bin", "bin")),
    "cp852": ((40, "general", "ci"), (81, "bin", "bin")),
    "latin7": (
        (20, "estonian", "cs"),
        (41, "general", "ci"),
        (42, "general", "cs"),
        (79, "bin", "bin"),
    ),
    "utf8mb4": (
        (255, "uca0900", "ai_ci"),
        (278, "uca0900", "as_cs"),
        (46, "bin", "bin"),
        (245, "croatian", "ci"),
        (266, "cs_0900", "ai_ci"),
        (289, "cs_0900", "as_cs"),
        (234, "czech", "ci"),
        (235, "danish", "ci"),
        (267, "da_0900", "ai_ci"),
        (290, "da_0900", "as_cs"),
        (256, "de_pb_0900", "ai_ci"),
        (279, "de_pb_0900", "as_cs"),
        (273, "eo_0900", "ai_ci"),
        (296, "eo_0900", "as_cs"),
        (241, "esperanto", "ci"),
        (230, "estonian", "ci"),
        (263, "es_0900", "ai_ci"),
        (286, "es_0900", "as_cs"),
        (270, "es_trad_0900", "ai_ci"),
        (293, "es_trad_0900", "as_cs"),
        (262, "et_0900", "ai_ci"),
        (285, "et_0900", "as_cs"),
        (45, "general", "ci"),
        (244, "german2", "ci"),
        (275, "hr_0900", "ai_ci"),
        (298, "hr_0900", "as_cs"),
        (242, "hungarian", "ci"),
        (274, "hu_0900", "ai_ci"),
        (297, "hu_0900", "as_cs"),
        (225, "icelandic", "ci"),
        (257, "is_0900", "ai_ci"),
        (280, "is_0900", "as_cs"),
        (303, "ja_0900", "as_cs"),
        (226, "latvian", "ci"),
        (271, "la_0900", "ai_ci"),
        (294, "la_0900", "as_cs"),
        (236, "lithuanian", "ci"),
        (268, "lt_0900", "ai_ci"),
        (291, "lt_0900", "as_cs"),
        (258, "lv_0900", "ai_ci"),
        (281, "lv_0900", "as_cs"),
        (240, "persian", "ci"),
        (261, "pl_0900", "ai_ci"),
        (284, "pl_0900", "as_cs"),
        (229, "polish", "ci"),
        (227, "romanian", "ci"),
        (239, "roman", "ci"),
        (259, "ro_0900", "ai_ci"),
        (282, "ro_0900", "as_cs"),
        (243, "sinhala", "ci"),
        (269, "sk_0900", "ai_ci"),
        (292, "sk_0900", "as_cs"),
        (237, "slovak", "ci"),
        (228, "slovenian", "ci"),
        (260, "sl_0900", "ai_ci"),
        (283, "sl_0900", "as_cs"),
        (238, "spanish2", "ci"),
        (231, "spanish", "ci"),
        (264, "sv_0900", "ai_ci"),
        (287, "sv_0900", "as_cs"),
        (232, "swedish", "ci"),
        (265, "tr_0900", "ai_ci"),
        (288, "tr_0900", "as_cs"),
        (233, "turkish", "ci"),
        (246, "unicode_520", "ci"),
        (224, "unicode", "ci"),
        (247, "vietnamese", "ci"),
        (277, "vi_0900", "ai_ci"),
        (300, "vi_0900", "as_cs"),
        (304, "ja_0900", "as_cs_ks"),
        (305, "uca0900", "as_ci"),
        (306, "ru_0900", "ai_ci"),
        (307, "ru_0900", "as_cs"),
        (308, "zh_0900", "as_cs"),
        (309, "uca0900", "bin"),
        (310, "nb_0900", "ai_ci"),
        (311, "nb_0900", "as_cs"),
        (312, "nn_0900", "ai_ci"),
        (313, "nn_0900", "as_cs"),
        (314, "sr_latn_0900", "ai_ci"),
        (315, "sr_latn_0900", "as_cs"),
        (316, "bs_0900", "ai_ci"),
        (317, "bs_0900", "as_cs"),
        (318, "bg_0900", "ai_ci"),
        (319, "bg_0900", "as_cs"),
        (320, "gl_0900", "ai_ci"),
        (321, "gl_0900", "as_cs"),
        (322, "mn_cyrl_0900", "ai_ci"),
        (323, "mn_cyrl_0900", "as_cs"),
    ),
    "cp1251": (
        (14, "bulgarian", "ci"),
        (23, "ukrainian", "ci"),
        (50, "bin", "bin"),
        (51, "general", "ci"),
        (52, "general", "cs"),
    ),
    "utf16": (
        (54, "general", "ci"),
        (55, "bin", "bin"),
        (101, "unicode", "ci"),
        (102, "icelandic", "ci"),
        (103, "latvian", "ci"),
        (104, "romanian", "ci"),
        (105, "slovenian", "ci"),
        (106, "polish", "ci"),
        (107, "estonian", "ci"),
        (108, "spanish", "ci"),
        (109, "swedish", "ci"),
        (110, "turkish", "ci"),
        (111, "czech", "ci"),
        (112, "danish", "ci"),
        (113, "lithuanian", "ci"),
        (114, "slovak", "ci"),
        (115, "spanish2", "ci"),
        (116, "roman", "ci"),
        (117, "persian", "ci"),
        (118, "esperanto", "ci"),
        (119, "hungarian", "ci"),
        (120, "sinhala", "ci"),
        (121, "german2", "ci"),
        (122, "croatian", "ci"),
        (123, "unicode_520", "ci"),
        (124, "vietnamese", "ci"),
    ),
    "utf16le": ((56, "general", "ci"), (62, "bin", "bin")),
    "cp1256": ((57, "general", "ci"), (67, "bin", "bin")),
    "cp1257": ((29, "lithuanian", "ci"), (58, "bin", "bin"), (59, "general", "ci")),
    "utf32": (
        (60, "general", "ci"),
        (61, "bin", "bin"),
        (160, "unicode", "ci"),
        (161, "icelandic", "ci"),
        (162, "latvian", "ci"),
        (163, "romanian", "ci"),
        (164, "slovenian", "ci"),
        (165, "polish", "ci"),
        (166, "estonian", "ci"),
        (167, "spanish", "ci"),
        (168, "swedish", "ci"),
        (169, "turkish", "ci"),
        (170, "czech", "ci"),
        (171, "danish", "ci"),
        (172, "lithuanian", "ci"),
        (173, "slovak", "ci"),
        (174, "spanish2", "ci"),
        (175, "roman", "ci"),
        (176, "persian", "ci"),
        (177, "esperanto", "ci"),
        (178, "hungarian", "ci"),
        (179, "sinhala", "ci"),
        (180, "german2", "ci"),
        (181, "croatian", "ci"),
        (182, "unicode_520", "ci"),
        (183, "vietnamese", "ci"),
    ),
    "binary": ((63, "bin", "bin"),),
    "geostd8": ((92, "general", "ci"), (93, "bin", "bin")),
    "cp932": ((95, "japanese", "ci"), (96, "bin", "bin")),
    "eucjpms": ((97, "japanese", "ci"), (98, "bin", "bin")),
    "gb18030": (
        (248, "chinese", "ci"),
        (249, "bin", "bin"),
        (250, "unicode_520", "ci"),
    ),
}

_BY_CHARSET: dict[str, tuple[Collation, ...]] = {
    charset: tuple(Collation(cid, charset, name, sens) for cid, name, sens in entries)
    for charset, entries in _COLLATIONS.items()
}

_BY_ID: dict[int, Collation] = {
    collation.id: collation
    for entries in _BY_CHARSET.values()
    for collation in entries
}


def charsets() -> list[str]:
    """Return the names of all known character sets, in the server's order."""
    return list(_BY_CHARSET)


def collations(charset: str) -> list[Collation]:
    """Return the collations of a character set; KeyError when it is unknown."""
    try:
        return list(_BY_CHARSET[charset])
    except KeyError:
        raise KeyError(f"Unknown character set: {charset!r}") from None


def collation_by_id(collation_id: int) -> Collation:
    """Return the collation with the given id; KeyError when it is unknown."""
    try:
        return _BY_ID[collation_id]
    except KeyError:
        raise KeyError(f"Unknown collation id: {collation_id!r}") from None


def charset_of(collation_id: int) -> str:
    """Return the character set a collation id belongs to."""
    return collation_by_id(collation_id).charset