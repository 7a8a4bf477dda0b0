"""The twelve declension slots of a Greek noun record.

Each noun record carries an article and an inflected form for every
case x number combination. Templates refer to those values by slot
identifier; this module is the closed list of identifiers and the static
table mapping each one to its accessor.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

from languages.types import GrammaticalCase, GrammaticalNumber, SlotKind

if TYPE_CHECKING:
    from engines.records import VocabularyRecord


class Slot(str, Enum):
    """Slot identifiers, in the fixed enumeration order (ties go to the later slot)."""
    NOM_SG_ARTICLE = "nom_sg_article"
    GEN_SG_ARTICLE = "gen_sg_article"
    ACC_SG_ARTICLE = "acc_sg_article"
    NOM_PL_ARTICLE = "nom_pl_article"
    GEN_PL_ARTICLE = "gen_pl_article"
    ACC_PL_ARTICLE = "acc_pl_article"
    NOMINATIVE_SG = "nominative_sg"
    GENITIVE_SG = "genitive_sg"
    ACCUSATIVE_SG = "accusative_sg"
    NOMINATIVE_PL = "nominative_pl"
    GENITIVE_PL = "genitive_pl"
    ACCUSATIVE_PL = "accusative_pl"

    @property
    def case(self) -> GrammaticalCase:
        return _SLOT_INFO[self][0]

    @property
    def number(self) -> GrammaticalNumber:
        return _SLOT_INFO[self][1]

    @property
    def kind(self) -> SlotKind:
        return _SLOT_INFO[self][2]

    @classmethod
    def parse(cls, name: str) -> Slot | None:
        """Look up a slot by canonical identifier or legacy field name."""
        try:
            return cls(name)
        except ValueError:
            return LEGACY_SLOT_NAMES.get(name)

    def resolve(self, record: VocabularyRecord) -> str:
        """Value of this slot on a vocabulary record."""
        return SLOT_ACCESSORS[self](record)


# slot -> (case, number, kind)
_SLOT_INFO: dict[Slot, tuple[GrammaticalCase, GrammaticalNumber, SlotKind]] = {
    Slot.NOM_SG_ARTICLE: ("nominative", "singular", "article"),
    Slot.GEN_SG_ARTICLE: ("genitive", "singular", "article"),
    Slot.ACC_SG_ARTICLE: ("accusative", "singular", "article"),
    Slot.NOM_PL_ARTICLE: ("nominative", "plural", "article"),
    Slot.GEN_PL_ARTICLE: ("genitive", "plural", "article"),
    Slot.ACC_PL_ARTICLE: ("accusative", "plural", "article"),
    Slot.NOMINATIVE_SG: ("nominative", "singular", "form"),
    Slot.GENITIVE_SG: ("genitive", "singular", "form"),
    Slot.ACCUSATIVE_SG: ("accusative", "singular", "form"),
    Slot.NOMINATIVE_PL: ("nominative", "plural", "form"),
    Slot.GENITIVE_PL: ("genitive", "plural", "form"),
    Slot.ACCUSATIVE_PL: ("accusative", "plural", "form"),
}

SLOT_ACCESSORS: dict[Slot, Callable[[VocabularyRecord], str]] = {
    Slot.NOM_SG_ARTICLE: lambda r: r.nom_sg_article,
    Slot.GEN_SG_ARTICLE: lambda r: r.gen_sg_article,
    Slot.ACC_SG_ARTICLE: lambda r: r.acc_sg_article,
    Slot.NOM_PL_ARTICLE: lambda r: r.nom_pl_article,
    Slot.GEN_PL_ARTICLE: lambda r: r.gen_pl_article,
    Slot.ACC_PL_ARTICLE: lambda r: r.acc_pl_article,
    Slot.NOMINATIVE_SG: lambda r: r.nominative_sg,
    Slot.GENITIVE_SG: lambda r: r.genitive_sg,
    Slot.ACCUSATIVE_SG: lambda r: r.accusative_sg,
    Slot.NOMINATIVE_PL: lambda r: r.nominative_pl,
    Slot.GENITIVE_PL: lambda r: r.genitive_pl,
    Slot.ACCUSATIVE_PL: lambda r: r.accusative_pl,
}

# Field names used by the sentence-era storage
LEGACY_SLOT_NAMES: dict[str, Slot] = {
    "NomSgArticle": Slot.NOM_SG_ARTICLE,
    "GenSgArticle": Slot.GEN_SG_ARTICLE,
    "AccSgArticle": Slot.ACC_SG_ARTICLE,
    "NomPlArticle": Slot.NOM_PL_ARTICLE,
    "GenPlArticle": Slot.GEN_PL_ARTICLE,
    "AccPlArticle": Slot.ACC_PL_ARTICLE,
    "NominativeSg": Slot.NOMINATIVE_SG,
    "GenitiveSg": Slot.GENITIVE_SG,
    "AccusativeSg": Slot.ACCUSATIVE_SG,
    "NominativePl": Slot.NOMINATIVE_PL,
    "GenitivePl": Slot.GENITIVE_PL,
    "AccusativePl": Slot.ACCUSATIVE_PL,
}

ARTICLE_SLOTS: tuple[Slot, ...] = tuple(s for s in Slot if s.kind == "article")
FORM_SLOTS: tuple[Slot, ...] = tuple(s for s in Slot if s.kind == "form")


def match_slot(value: str, candidates: tuple[Slot, ...], record: VocabularyRecord) -> Slot | None:
    """Last candidate slot whose value on ``record`` equals ``value`` exactly.

    Neuter and feminine nouns share nominative/accusative values, so ties are
    common; the later slot in enumeration order wins, which resolves them to
    the accusative.
    """
    for slot in reversed(candidates):
        if slot.resolve(record) == value:
            return slot
    return None
